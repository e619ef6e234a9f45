from typing import Dict, Any

from kivrims.providers.mpesa_provider import MPesaClient
from kivrims.utils.logger import get_logger
from kivrims.utils.phone import normalize_phone_number

logger = get_logger(__name__)


class PaymentService:
    """STK push orchestration"""

    @staticmethod
    def initiate_stk_push(client: MPesaClient, amount: int, phone: str) -> Dict[str, Any]:
        """
        Send an STK push prompt to the customer's phone

        Args:
            client: Daraja client for this application
            amount: Amount to charge
            phone: Customer phone number as entered by the customer

        Returns:
            Daraja response body

        Raises:
            AccessTokenError: Daraja refused or failed the OAuth exchange
            GatewayError: Daraja did not accept the push
        """
        formatted_phone = normalize_phone_number(phone)

        response = client.stk_push(amount=amount, phone=formatted_phone)

        logger.info(
            f'STK Push accepted for {formatted_phone}: '
            f'CheckoutRequestID={response.get("CheckoutRequestID")}'
        )
        return response
