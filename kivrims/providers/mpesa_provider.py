"""
M-Pesa Daraja Client
Lipa na M-Pesa Online (STK Push) against the Safaricom Daraja API.

Flows
-----
Authentication
    GET  /oauth/v1/generate?grant_type=client_credentials  (Basic auth)
    A fresh token is requested for every STK push; nothing is cached.

STK Push
    POST /mpesa/stkpush/v1/processrequest                  (Bearer auth)
    Safaricom later POSTs the outcome to CallBackURL.

Required config keys
--------------------
    consumer_key        – From Safaricom Developer Portal app
    consumer_secret     – From Safaricom Developer Portal app
    shortcode           – Business shortcode (PayBill)
    passkey             – Lipa na M-Pesa Online passkey
    callback_url        – Publicly reachable callback endpoint

Optional config keys
--------------------
    environment         – "sandbox" (default) | "production"
    timeout             – Seconds to wait on Daraja (default 30)
"""

import base64
import logging
from datetime import datetime
from typing import Any, Dict, Mapping, Tuple

import requests

from kivrims.errors import AccessTokenError, GatewayError

logger = logging.getLogger(__name__)

# Daraja base URLs
_BASE_URLS = {
    "sandbox":    "https://sandbox.safaricom.co.ke",
    "production": "https://api.safaricom.co.ke",
}

# ResponseCode Daraja returns when an STK push was accepted
SUCCESS_RESPONSE_CODE = "0"

TRANSACTION_TYPE  = "CustomerPayBillOnline"
ACCOUNT_REFERENCE = "User Payment"
TRANSACTION_DESC  = "Payment for services"


class MPesaClient:
    """Thin Daraja client: access token + STK push."""

    # Daraja endpoint paths
    _EP_AUTH     = "/oauth/v1/generate"
    _EP_STK_PUSH = "/mpesa/stkpush/v1/processrequest"

    def __init__(self, config: Dict[str, Any]):
        self.consumer_key    = config.get("consumer_key", "")
        self.consumer_secret = config.get("consumer_secret", "")
        self.shortcode       = str(config.get("shortcode", ""))
        self.passkey         = config.get("passkey", "")
        self.callback_url    = config.get("callback_url", "")
        self.environment     = (config.get("environment") or "sandbox").lower()
        self.timeout         = config.get("timeout", 30)

        if not self.consumer_key or not self.consumer_secret:
            raise ValueError("MPesaClient: 'consumer_key' and 'consumer_secret' are required")
        if self.environment not in _BASE_URLS:
            raise ValueError(f"MPesaClient: environment must be 'sandbox' or 'production', got '{self.environment}'")

        self.base_url = _BASE_URLS[self.environment]

        self._session = requests.Session()
        self._session.headers.update({"Content-Type": "application/json"})

    @classmethod
    def from_app_config(cls, app_config: Mapping[str, Any]) -> "MPesaClient":
        """Build a client from the MPESA_* keys of a Flask config."""
        return cls({
            "consumer_key":    app_config.get("MPESA_CONSUMER_KEY"),
            "consumer_secret": app_config.get("MPESA_CONSUMER_SECRET"),
            "shortcode":       app_config.get("MPESA_SHORTCODE"),
            "passkey":         app_config.get("MPESA_PASSKEY"),
            "callback_url":    app_config.get("MPESA_CALLBACK_URL"),
            "environment":     app_config.get("MPESA_ENVIRONMENT"),
            "timeout":         app_config.get("MPESA_TIMEOUT", 30),
        })

    def get_access_token(self) -> str:
        """Request a new OAuth access token from Daraja."""
        url = f"{self.base_url}{self._EP_AUTH}?grant_type=client_credentials"
        try:
            resp = self._session.get(
                url,
                auth=(self.consumer_key, self.consumer_secret),
                timeout=self.timeout,
            )
            resp.raise_for_status()
            token = resp.json()["access_token"]
        except requests.HTTPError as exc:
            logger.error("M-Pesa token error: HTTP %s %s", exc.response.status_code, exc.response.text[:300])
            raise AccessTokenError("Failed to get M-Pesa access token") from exc
        except (requests.RequestException, ValueError, KeyError, TypeError) as exc:
            logger.error("M-Pesa token error: %s", exc)
            raise AccessTokenError("Failed to get M-Pesa access token") from exc

        if not token:
            logger.error("M-Pesa token error: response carried no access_token")
            raise AccessTokenError("Failed to get M-Pesa access token")

        logger.debug("MPesaClient: access token obtained")
        return token

    def generate_password(self) -> Tuple[str, str]:
        """
        Generate the STK Push timestamp and password.

        Password = Base64(BusinessShortCode + Passkey + Timestamp)
        Timestamp = YYYYMMDDHHmmss in server local time
        """
        timestamp = datetime.now().strftime("%Y%m%d%H%M%S")
        raw = f"{self.shortcode}{self.passkey}{timestamp}"
        password = base64.b64encode(raw.encode("utf-8")).decode("utf-8")
        return timestamp, password

    def stk_push(self, amount: int, phone: str) -> Dict[str, Any]:
        """
        Initiate a Lipa na M-Pesa Online payment.

        `phone` must already be in international form (2547XXXXXXXX).
        Returns the Daraja response body when ResponseCode is "0",
        raises GatewayError with that body otherwise. Network errors
        from requests are not caught.
        """
        token = self.get_access_token()
        timestamp, password = self.generate_password()

        payload = {
            "BusinessShortCode": self.shortcode,
            "Password":          password,
            "Timestamp":         timestamp,
            "TransactionType":   TRANSACTION_TYPE,
            "Amount":            amount,
            "PartyA":            phone,
            "PartyB":            self.shortcode,
            "PhoneNumber":       phone,
            "CallBackURL":       self.callback_url,
            "AccountReference":  ACCOUNT_REFERENCE,
            "TransactionDesc":   TRANSACTION_DESC,
        }

        resp = self._session.post(
            f"{self.base_url}{self._EP_STK_PUSH}",
            json=payload,
            headers={"Authorization": f"Bearer {token}"},
            timeout=self.timeout,
        )

        try:
            data: Dict[str, Any] = resp.json()
        except ValueError:
            data = {"raw": resp.text}
        if not isinstance(data, dict):
            data = {"raw": data}

        logger.debug("MPesa [stk_push] HTTP %s: %s", resp.status_code, data)

        # Daraja sometimes returns 200 with an error in the body
        if resp.ok and str(data.get("ResponseCode")) == SUCCESS_RESPONSE_CODE:
            return data

        logger.error("STK Push failed: %s", data)
        raise GatewayError("STK Push initiation failed.", payload=data)
