"""
SadadPay Client
Composition root wiring configuration, transport and services together
"""

import logging
from typing import Any, List, Mapping, Optional, Union

from sadad_pay.client.http_client import HttpClient, Transport
from sadad_pay.config.config_loader import ConfigLoader
from sadad_pay.config.sadad_config import GatewayEndpoints, SadadConfig
from sadad_pay.exceptions import ConfigurationError
from sadad_pay.models.currency import CurrencyRate
from sadad_pay.models.invoice import (
    CreatedInvoice,
    InvoiceInfo,
    InvoiceRequest,
    RefundResult,
)
from sadad_pay.services.currency import Amount, CurrencyConverter, CurrencyRateTable
from sadad_pay.services.invoice import InvoiceService
from sadad_pay.services.token_manager import TokenManager
from sadad_pay.utils.logger import Logger

logger = logging.getLogger(__name__)


class SadadClient:
    """
    Client for the SadadPay invoicing gateway

    Configuration is validated before anything touches the network and
    stays frozen for the life of the client. Build another client for
    other credentials or the other mode.

    Example:
        >>> client = SadadClient({
        ...     "client_id": "my-id",
        ...     "client_secret": "my-secret",
        ...     "sandbox_mode": True,
        ... })
        >>> refresh_token = client.acquire_refresh_token()
        >>> invoice = client.create_invoice(
        ...     {"Invoices": [{"ref_Number": "ORD-1", "amount": 12.5}]},
        ...     refresh_token,
        ... )
        >>> print(invoice.invoice_url)
    """

    def __init__(
        self,
        config: Union[SadadConfig, Mapping[str, Any]],
        transport: Optional[Transport] = None,
    ) -> None:
        """
        Create a new client

        Args:
            config: A SadadConfig, or a plain dictionary to resolve into one
            transport: Optional transport; a pooled HttpClient by default

        Raises:
            ConfigurationError: If the configuration is missing or invalid
        """
        if not isinstance(config, SadadConfig):
            if not isinstance(config, Mapping):
                raise ConfigurationError(
                    "Client configuration must be a SadadConfig or a mapping"
                )
            config = ConfigLoader().resolve(dict(config))

        self._config = config
        self._endpoints = config.get_endpoints()
        self._owns_transport = transport is None
        self._transport: Transport = transport or HttpClient(timeout=config.timeout)
        self._audit_log = Logger(config.log_path)

        self._tokens = TokenManager(config, self._transport, self._endpoints)
        self._invoices = InvoiceService(
            self._transport, self._endpoints, self._tokens, self._audit_log
        )
        self._rates = CurrencyRateTable(self._transport, self._endpoints)
        self._converter = CurrencyConverter(self._rates)

        logger.debug("SadadClient ready for %s", self._endpoints.api_base_url)

    @property
    def config(self) -> SadadConfig:
        return self._config

    @property
    def endpoints(self) -> GatewayEndpoints:
        return self._endpoints

    @property
    def sandbox_mode(self) -> bool:
        return self._config.sandbox_mode

    # Tokens

    def acquire_refresh_token(self) -> str:
        """Exchange the client credentials for a refresh token"""
        return self._tokens.acquire_refresh_token()

    def mint_access_token(self, refresh_token: str) -> str:
        """Mint a single-use access token"""
        return self._tokens.mint_access_token(refresh_token)

    # Invoices

    def create_invoice(
        self,
        request: Union[InvoiceRequest, Mapping[str, Any]],
        refresh_token: str,
    ) -> CreatedInvoice:
        """Create an invoice and return its id and payment URL"""
        return self._invoices.create_invoice(request, refresh_token)

    def get_invoice_info(self, invoice_id: Union[int, str], refresh_token: str) -> InvoiceInfo:
        """Look up an invoice by id"""
        return self._invoices.get_invoice_info(invoice_id, refresh_token)

    def refund_invoice(self, request: Mapping[str, Any], refresh_token: str) -> RefundResult:
        """Request a refund for an invoice"""
        return self._invoices.refund_invoice(request, refresh_token)

    # Currencies

    def get_currency_list(self) -> List[CurrencyRate]:
        """Fetch the gateway currency list"""
        return self._rates.fetch_rates()

    def convert_amount(self, currency: str, amount: Amount) -> str:
        """Convert an amount into KWD, formatted to the currency's precision"""
        return self._converter.convert(currency, amount)

    def close(self) -> None:
        """Release the transport if this client created it, and the audit log"""
        if self._owns_transport and isinstance(self._transport, HttpClient):
            self._transport.close()
        self._audit_log.close()

    def __enter__(self) -> "SadadClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return (
            f"<SadadClient client_id={self._config.client_id!r} "
            f"api={self._endpoints.api_base_url!r}>"
        )
