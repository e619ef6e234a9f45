"""
Phone number helpers for the M-Pesa gateway
"""


def normalize_phone_number(phone: str) -> str:
    """
    Convert a local Kenyan number to the international form Daraja expects.

    "+254712345678" -> "254712345678"
    "0712345678"    -> "254712345678"
    "0112345678"    -> "254112345678"

    Anything else is returned as-is; length and digits are not checked.
    """
    if phone.startswith('+'):
        phone = phone[1:]

    if phone.startswith('07') or phone.startswith('01'):
        phone = '254' + phone[1:]

    return phone
