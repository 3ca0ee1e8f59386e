"""
SadadPay Integration SDK for Python

Main entry point for the SDK
"""

from sadad_pay.client import SadadClient
from sadad_pay.exceptions import (
    SadadError,
    SadadErrorCategory,
    ConfigurationError,
    AuthenticationError,
    TransportError,
    GatewayError,
    InvoiceCreationError,
    InvoiceNotFoundError,
    RefundError,
    CurrencyNotFoundError,
    RateFetchError,
    InvalidPhoneError,
)

# HTTP Client
from sadad_pay.client import (
    HttpClient,
    HttpMethod,
    HttpResponse,
    HttpAuditEntry,
    Transport,
)

# Configuration
from sadad_pay.config import (
    SadadConfig,
    SadadEnvironment,
    GatewayEndpoints,
    ConfigLoader,
    ConfigValidator,
    SADAD_API_URLS,
    SADAD_PAY_URLS,
    ENV_VAR_MAPPING,
    ConfigDefaults,
)

# Models
from sadad_pay.models import (
    CurrencyRate,
    InvoiceLine,
    InvoiceRequest,
    CreatedInvoice,
    InvoiceInfo,
    RefundResult,
)

# Services
from sadad_pay.services import (
    TokenManager,
    InvoiceService,
    InvoiceState,
    CurrencyRateTable,
    CurrencyConverter,
    SETTLEMENT_CURRENCY,
    get_currency_list,
    get_kwd_amount,
)

# Utilities
from sadad_pay.utils import Logger, normalize_digits, validate_phone

__version__ = "0.1.0"

__all__ = [
    # Client
    "SadadClient",
    # HTTP Client
    "HttpClient",
    "HttpMethod",
    "HttpResponse",
    "HttpAuditEntry",
    "Transport",
    # Exceptions
    "SadadError",
    "SadadErrorCategory",
    "ConfigurationError",
    "AuthenticationError",
    "TransportError",
    "GatewayError",
    "InvoiceCreationError",
    "InvoiceNotFoundError",
    "RefundError",
    "CurrencyNotFoundError",
    "RateFetchError",
    "InvalidPhoneError",
    # Configuration
    "SadadConfig",
    "SadadEnvironment",
    "GatewayEndpoints",
    "ConfigLoader",
    "ConfigValidator",
    "SADAD_API_URLS",
    "SADAD_PAY_URLS",
    "ENV_VAR_MAPPING",
    "ConfigDefaults",
    # Models
    "CurrencyRate",
    "InvoiceLine",
    "InvoiceRequest",
    "CreatedInvoice",
    "InvoiceInfo",
    "RefundResult",
    # Services
    "TokenManager",
    "InvoiceService",
    "InvoiceState",
    "CurrencyRateTable",
    "CurrencyConverter",
    "SETTLEMENT_CURRENCY",
    "get_currency_list",
    "get_kwd_amount",
    # Utilities
    "Logger",
    "normalize_digits",
    "validate_phone",
]
