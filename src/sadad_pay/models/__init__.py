"""Models module initialization"""

from sadad_pay.models.currency import CurrencyRate
from sadad_pay.models.invoice import (
    InvoiceLine,
    InvoiceRequest,
    CreatedInvoice,
    InvoiceInfo,
    RefundResult,
)

__all__ = [
    "CurrencyRate",
    "InvoiceLine",
    "InvoiceRequest",
    "CreatedInvoice",
    "InvoiceInfo",
    "RefundResult",
]
