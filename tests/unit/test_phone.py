"""
Unit Tests for phone number normalization
"""

import pytest

from kivrims.utils.phone import normalize_phone_number


class TestNormalizePhoneNumber:

    @pytest.mark.parametrize('phone, expected', [
        ('0712345678', '254712345678'),
        ('0112345678', '254112345678'),
    ])
    def test_local_prefix_replaced(self, phone, expected):
        result = normalize_phone_number(phone)

        assert result == expected
        assert result.startswith('254')
        assert len(result) == len(phone) + 2

    def test_plus_prefix_stripped(self):
        assert normalize_phone_number('+254712345678') == '254712345678'

    def test_only_one_plus_is_stripped(self):
        assert normalize_phone_number('++254712345678') == '+254712345678'

    @pytest.mark.parametrize('phone', [
        '254712345678',
        '254112345678',
        '712345678',
        '0812345678',
        'not-a-number',
        '',
    ])
    def test_other_input_unchanged(self, phone):
        assert normalize_phone_number(phone) == phone

    def test_plus_then_local_prefix(self):
        # "+07..." loses the plus, then the local prefix rule applies
        assert normalize_phone_number('+0712345678') == '254712345678'
