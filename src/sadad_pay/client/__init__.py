"""
HTTP Client module for SadadPay SDK
"""

from sadad_pay.client.http_client import (
    HttpClient,
    HttpMethod,
    HttpResponse,
    HttpAuditEntry,
    Transport,
)
from sadad_pay.client.sadad_client import SadadClient

__all__ = [
    "SadadClient",
    "HttpClient",
    "HttpMethod",
    "HttpResponse",
    "HttpAuditEntry",
    "Transport",
]
