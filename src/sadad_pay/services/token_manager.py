"""
Token lifecycle for the SadadPay API

Client credentials buy a long-lived refresh token; the refresh token
buys a short-lived access token. Access tokens are minted for every
protected call and never reused.
"""

import base64
import logging
from typing import Any, Dict, Optional

from sadad_pay.client.http_client import HttpMethod, Transport
from sadad_pay.config.sadad_config import GatewayEndpoints, SadadConfig
from sadad_pay.exceptions import AuthenticationError
from sadad_pay.services._responses import decode_envelope, is_blank, response_field

logger = logging.getLogger(__name__)

CREDENTIALS_HINT = (
    "Please make sure to provide the correct Sadad client ID, secret "
    "and live/sandbox mode"
)


def _failure_details(payload: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    # the error key is informational; token failures stay authentication failures
    error_key = payload.get("errorKey")
    if is_blank(error_key):
        return None
    return {"error_key": error_key}


class TokenManager:
    """
    Issues refresh tokens and mints access tokens

    Holds no token state, so one instance can serve concurrent callers.
    """

    def __init__(
        self,
        config: SadadConfig,
        transport: Transport,
        endpoints: GatewayEndpoints,
    ) -> None:
        self._config = config
        self._transport = transport
        self._endpoints = endpoints

    def _basic_authorization(self) -> str:
        credentials = f"{self._config.client_id}:{self._config.client_secret}"
        encoded = base64.b64encode(credentials.encode("utf-8")).decode("ascii")
        return f"Basic {encoded}"

    def acquire_refresh_token(self) -> str:
        """
        Exchange the client credentials for a refresh token

        Returns:
            The refresh token

        Raises:
            AuthenticationError: If the gateway did not issue a token,
                whatever error key it answered with
            TransportError: If the request could not be sent
        """
        response = self._transport.send(
            HttpMethod.POST,
            self._endpoints.refresh_token_url,
            {"Authorization": self._basic_authorization()},
            {},
        )
        payload = decode_envelope(response)

        refresh_token = response_field(payload, "refreshToken")
        if is_blank(refresh_token):
            raise AuthenticationError(
                f"Could not generate Sadad refresh token. {CREDENTIALS_HINT}",
                code="AUTH01",
                status_code=response.status,
                details=_failure_details(payload),
            )

        logger.debug("Refresh token issued (sandbox=%s)", self._config.sandbox_mode)
        return refresh_token

    def mint_access_token(self, refresh_token: str) -> str:
        """
        Mint a single-use access token from a refresh token

        Args:
            refresh_token: Token from acquire_refresh_token

        Returns:
            The access token

        Raises:
            AuthenticationError: If the gateway did not mint a token
        """
        if is_blank(refresh_token):
            raise AuthenticationError("A refresh token is required", code="AUTH03")

        response = self._transport.send(
            HttpMethod.POST,
            self._endpoints.access_token_url,
            {"Authorization": f"Bearer {refresh_token}"},
        )
        payload = decode_envelope(response)

        access_token = response_field(payload, "accessToken")
        if is_blank(access_token):
            raise AuthenticationError(
                f"Could not generate Sadad access token. {CREDENTIALS_HINT}",
                code="AUTH02",
                status_code=response.status,
                details=_failure_details(payload),
            )
        return access_token

    def authorization_headers(self, refresh_token: str) -> Dict[str, str]:
        """Headers for one protected call, carrying a freshly minted access token"""
        return {"Authorization": f"Bearer {self.mint_access_token(refresh_token)}"}
