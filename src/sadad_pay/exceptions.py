"""Exception classes for SadadPay SDK"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional


class SadadErrorCategory(str, Enum):
    """SadadPay error category codes"""
    CONFIG = "CONFIG"
    AUTH = "AUTH"
    NETWORK = "NET"
    GATEWAY = "GW"
    INVOICE = "INV"
    REFUND = "REF"
    CURRENCY = "CUR"
    PHONE = "PHONE"
    UNKNOWN = "UNKNOWN"


class SadadError(Exception):
    """
    Base exception for SadadPay errors

    All errors in the SDK extend from this class.
    The category lets callers branch on the kind of failure
    without matching every subclass.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        status_code: Optional[int] = None,
        cause: Optional[Exception] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.status_code = status_code
        self.cause = cause
        self.details = details
        self.timestamp = datetime.now(timezone.utc)
        self.category = self._determine_category(code)

    def _determine_category(self, code: Optional[str]) -> SadadErrorCategory:
        """Determine error category from code"""
        if not code:
            return SadadErrorCategory.UNKNOWN

        for category in SadadErrorCategory:
            if category is not SadadErrorCategory.UNKNOWN and code.startswith(category.value):
                return category

        return SadadErrorCategory.UNKNOWN

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary"""
        return {
            "name": self.__class__.__name__,
            "message": str(self),
            "code": self.code,
            "status_code": self.status_code,
            "category": self.category.value,
            "timestamp": self.timestamp.isoformat(),
            "details": self.details,
        }

    def is_category(self, category: SadadErrorCategory) -> bool:
        """Check if error belongs to a category"""
        return self.category == category

    def get_description(self) -> str:
        """Get human-readable error description"""
        parts = [str(self)]

        if self.code:
            parts.insert(0, f"[{self.code}]")

        if self.status_code:
            parts.append(f"(HTTP {self.status_code})")

        return " ".join(parts)


class ConfigurationError(SadadError):
    """Missing or invalid client configuration"""

    def __init__(
        self,
        message: str,
        code: str = "CONFIG01",
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, code=code, details=details)
        self.field = field


class AuthenticationError(SadadError):
    """
    Token issuance or minting failed

    The gateway does not distinguish wrong credentials, wrong
    sandbox/live mode and service outage, so neither does this error.
    """

    def __init__(
        self,
        message: str,
        code: str = "AUTH01",
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, code=code, status_code=status_code, details=details)


class TransportError(SadadError):
    """
    Network error for HTTP transport layer failures
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        network_code: str = "NET10",
        cause: Optional[Exception] = None,
    ) -> None:
        super().__init__(
            message, code=network_code, status_code=status_code, cause=cause
        )
        self.network_code = network_code

    @classmethod
    def timeout(
        cls, message: str = "Request timed out", cause: Optional[Exception] = None
    ) -> "TransportError":
        """Create a timeout error"""
        return cls(message, status_code=408, network_code="NET01", cause=cause)

    @classmethod
    def connection_refused(
        cls, message: str = "Connection refused", cause: Optional[Exception] = None
    ) -> "TransportError":
        """Create a connection refused error"""
        return cls(message, network_code="NET02", cause=cause)

    @classmethod
    def ssl_error(
        cls, message: str = "SSL/TLS error", cause: Optional[Exception] = None
    ) -> "TransportError":
        """Create an SSL error"""
        return cls(message, network_code="NET04", cause=cause)


class GatewayError(SadadError):
    """
    The gateway answered with a business error key

    The key is kept verbatim in ``error_key`` and used as the message.
    """

    def __init__(self, error_key: str, status_code: Optional[int] = None) -> None:
        super().__init__(str(error_key), code="GW01", status_code=status_code)
        self.error_key = error_key


class InvoiceCreationError(SadadError):
    """Create-invoice response did not carry an invoice id"""

    def __init__(
        self,
        message: str = "Could not create new invoice",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, code="INV01", details=details)


class InvoiceNotFoundError(SadadError):
    """Invoice lookup response did not carry a pay key"""

    def __init__(
        self,
        message: str = "Could not get invoice info",
        invoice_id: Any = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, code="INV02", details=details)
        self.invoice_id = invoice_id


class RefundError(SadadError):
    """Refund response did not carry a refund id"""

    def __init__(
        self,
        message: str = "Could not refund the invoice amount",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, code="REF01", details=details)


class CurrencyNotFoundError(SadadError):
    """Currency is missing from the gateway list or converts to zero"""

    def __init__(self, currency: str) -> None:
        super().__init__(
            f"Currency {currency} is not found in Sadad currency list",
            code="CUR01",
        )
        self.currency = currency


class RateFetchError(SadadError):
    """Currency list could not be loaded"""

    def __init__(
        self,
        message: str = "Could not load Sadad currency list",
        status_code: Optional[int] = None,
        cause: Optional[Exception] = None,
    ) -> None:
        super().__init__(message, code="CUR02", status_code=status_code, cause=cause)


class InvalidPhoneError(SadadError):
    """Phone number length is outside the accepted bounds"""

    def __init__(self, message: str, phone: Optional[str] = None) -> None:
        super().__init__(message, code="PHONE01")
        self.phone = phone
