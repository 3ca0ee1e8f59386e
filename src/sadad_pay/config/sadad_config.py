"""
SadadPay Configuration Types and Schema
Type-safe configuration objects for the SadadPay SDK
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, StrictBool


class SadadEnvironment(str, Enum):
    """SadadPay environment types"""
    SANDBOX = "sandbox"
    LIVE = "live"


# Base URLs for SadadPay environments
SADAD_API_URLS = {
    SadadEnvironment.SANDBOX: "https://apisandbox.sadadpay.net/api",
    SadadEnvironment.LIVE: "https://api.sadadpay.net/api",
}

SADAD_PAY_URLS = {
    SadadEnvironment.SANDBOX: "https://sandbox.sadadpay.net/pay",
    SadadEnvironment.LIVE: "https://sadadpay.net/pay",
}


class ConfigDefaults:
    """Default configuration values"""
    TIMEOUT = 30000


# Environment variable mapping
ENV_VAR_MAPPING = {
    "SADAD_CLIENT_ID": "client_id",
    "SADAD_CLIENT_SECRET": "client_secret",
    "SADAD_SANDBOX_MODE": "sandbox_mode",
    "SADAD_LOG_PATH": "log_path",
    "SADAD_TIMEOUT": "timeout",
}


class GatewayEndpoints(BaseModel):
    """
    Gateway URLs for one environment

    Only the two base URLs vary between sandbox and live; every
    API path hangs off ``api_base_url``.
    """

    api_base_url: str
    pay_base_url: str

    model_config = {"frozen": True}

    @classmethod
    def for_environment(cls, environment: SadadEnvironment) -> "GatewayEndpoints":
        return cls(
            api_base_url=SADAD_API_URLS[environment],
            pay_base_url=SADAD_PAY_URLS[environment],
        )

    @classmethod
    def for_mode(cls, sandbox_mode: bool) -> "GatewayEndpoints":
        return cls.for_environment(
            SadadEnvironment.SANDBOX if sandbox_mode else SadadEnvironment.LIVE
        )

    @property
    def refresh_token_url(self) -> str:
        return f"{self.api_base_url}/User/GenerateRefreshToken"

    @property
    def access_token_url(self) -> str:
        return f"{self.api_base_url}/User/GenerateAccessToken"

    @property
    def invoice_insert_url(self) -> str:
        return f"{self.api_base_url}/Invoice/insert"

    @property
    def invoice_get_by_id_url(self) -> str:
        return f"{self.api_base_url}/Invoice/getbyid"

    @property
    def refund_insert_url(self) -> str:
        return f"{self.api_base_url}/Refund/insert"

    @property
    def currency_list_url(self) -> str:
        return f"{self.api_base_url}/Common/getcurrencies"

    def pay_url(self, pay_key: str) -> str:
        """Build the customer-facing payment URL for a pay key"""
        return f"{self.pay_base_url}/{pay_key}"


class SadadConfig(BaseModel):
    """
    Main SadadPay Configuration class

    Holds the client credentials and the sandbox/live switch. There is
    no default mode: omitting ``sandbox_mode`` is a configuration error.
    Instances are frozen; a client needing other credentials builds a
    new config.
    """

    # Required - Credentials
    client_id: str = Field(
        ...,
        description="Client ID from the SadadPay merchant panel",
        min_length=1
    )
    client_secret: str = Field(
        ...,
        description="Client secret from the SadadPay merchant panel",
        min_length=1
    )
    sandbox_mode: StrictBool = Field(
        ...,
        description="True for the sandbox gateway, False for live"
    )

    # Optional - Audit logging
    log_path: Optional[str] = Field(
        default=None,
        description="File path for the append-only audit log"
    )

    # Optional - Transport
    timeout: int = Field(
        default=ConfigDefaults.TIMEOUT,
        description="Request timeout in milliseconds",
        ge=1000,
        le=300000
    )

    model_config = {
        "str_strip_whitespace": True,
        "frozen": True,
    }

    @property
    def environment(self) -> SadadEnvironment:
        return SadadEnvironment.SANDBOX if self.sandbox_mode else SadadEnvironment.LIVE

    def get_endpoints(self) -> GatewayEndpoints:
        """Get the gateway endpoints for the configured mode"""
        return GatewayEndpoints.for_environment(self.environment)

    def __repr__(self) -> str:
        return (
            f"SadadConfig(client_id={self.client_id!r}, client_secret='***', "
            f"sandbox_mode={self.sandbox_mode!r}, log_path={self.log_path!r}, "
            f"timeout={self.timeout!r})"
        )
