"""Services module initialization"""

from sadad_pay.services.token_manager import TokenManager
from sadad_pay.services.invoice import InvoiceService, InvoiceState
from sadad_pay.services.currency import (
    CurrencyRateTable,
    CurrencyConverter,
    SETTLEMENT_CURRENCY,
    get_currency_list,
    get_kwd_amount,
)

__all__ = [
    "TokenManager",
    "InvoiceService",
    "InvoiceState",
    "CurrencyRateTable",
    "CurrencyConverter",
    "SETTLEMENT_CURRENCY",
    "get_currency_list",
    "get_kwd_amount",
]
