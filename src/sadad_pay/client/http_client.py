"""
HTTP transport layer for the SadadPay API
Sends one request per call over a pooled session and hands back
the raw body and status; interpreting the payload is left to the services
"""

import json
import logging
import time
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable, Dict, Optional, Protocol

import requests
from requests.adapters import HTTPAdapter

from sadad_pay.config.sadad_config import ConfigDefaults
from sadad_pay.exceptions import TransportError

# Logger for this module
logger = logging.getLogger(__name__)


class HttpMethod(str, Enum):
    """HTTP method types supported by the gateway"""
    GET = "GET"
    POST = "POST"


@dataclass
class HttpResponse:
    """HTTP response wrapper"""
    content: bytes
    status: int
    headers: Dict[str, str]
    duration: int  # milliseconds
    request_id: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def json(self) -> Any:
        """Decode the body, or None when it is empty or not JSON"""
        if not self.content:
            return None
        try:
            return json.loads(self.content)
        except ValueError:
            return None


@dataclass
class HttpAuditEntry:
    """Audit entry for one HTTP exchange"""
    timestamp: str
    request_id: str
    method: str
    url: str
    headers: Dict[str, str]
    body: Optional[Any] = None
    status: Optional[int] = None
    duration: int = 0
    success: bool = False
    error: Optional[str] = None


# Sensitive fields that should be redacted in logs
SENSITIVE_FIELDS = [
    "authorization",
    "clientsecret",
    "client_secret",
    "refreshtoken",
    "accesstoken",
]


class Transport(Protocol):
    """
    Anything able to send a request to the gateway

    Implementations return non-2xx responses instead of raising, and
    raise TransportError only when no response was obtained.
    """

    def send(
        self,
        method: HttpMethod,
        url: str,
        headers: Dict[str, str],
        body: Optional[Any] = None,
    ) -> HttpResponse:
        ...


class HttpClient:
    """
    HTTP Client for the SadadPay API

    Features:
    - Connection keep-alive via session pooling
    - Request ID generation for traceability
    - Debug logging with credentials redacted
    - No automatic retries; failures surface as TransportError

    Example:
        >>> client = HttpClient(timeout=30000)
        >>> response = client.send(HttpMethod.GET, "https://api.sadadpay.net/api/Common/getcurrencies", {})
        >>> print(response.status)
    """

    def __init__(self, timeout: int = ConfigDefaults.TIMEOUT) -> None:
        """
        Create a new HTTP client instance

        Args:
            timeout: Request timeout in milliseconds
        """
        self.timeout = timeout
        self._audit_log_callback: Optional[Callable[[HttpAuditEntry], None]] = None
        self._session = self._create_session()

    def _create_session(self) -> requests.Session:
        """Create requests session with connection pooling"""
        session = requests.Session()

        session.headers.update({
            "Content-Type": "application/json",
            "Accept": "application/json",
        })

        adapter = HTTPAdapter(
            pool_connections=10,
            pool_maxsize=10,
            max_retries=0,
        )

        session.mount("http://", adapter)
        session.mount("https://", adapter)

        return session

    def _generate_request_id(self) -> str:
        """Generate unique request ID for traceability"""
        timestamp = hex(int(time.time() * 1000))[2:]
        unique_id = uuid.uuid4().hex[:8]
        return f"sadad-{timestamp}-{unique_id}"

    def _redact_sensitive_data(self, obj: Any) -> Any:
        """Redact sensitive data from object for logging"""
        if isinstance(obj, list):
            return [self._redact_sensitive_data(item) for item in obj]

        if isinstance(obj, dict):
            redacted = {}
            for key, value in obj.items():
                lower_key = str(key).lower()
                if any(field in lower_key for field in SENSITIVE_FIELDS):
                    redacted[key] = "[REDACTED]"
                elif isinstance(value, (dict, list)):
                    redacted[key] = self._redact_sensitive_data(value)
                else:
                    redacted[key] = value
            return redacted

        return obj

    def _normalize_error(self, error: requests.exceptions.RequestException) -> TransportError:
        """Map a requests failure onto TransportError"""
        if isinstance(error, requests.exceptions.Timeout):
            return TransportError.timeout(cause=error)

        if isinstance(error, requests.exceptions.SSLError):
            return TransportError.ssl_error(f"SSL/TLS error: {error}", cause=error)

        if isinstance(error, requests.exceptions.ConnectionError):
            return TransportError.connection_refused(
                f"Connection error: {error}", cause=error
            )

        return TransportError(f"Request error: {error}", cause=error)

    def _log_audit(self, entry: HttpAuditEntry) -> None:
        logger.debug(
            "%s %s -> %s in %dms [%s]",
            entry.method, entry.url, entry.status, entry.duration, entry.request_id,
        )
        if self._audit_log_callback:
            self._audit_log_callback(entry)

    def set_audit_log_callback(
        self, callback: Callable[[HttpAuditEntry], None]
    ) -> None:
        """Set audit log callback"""
        self._audit_log_callback = callback

    def send(
        self,
        method: HttpMethod,
        url: str,
        headers: Dict[str, str],
        body: Optional[Any] = None,
    ) -> HttpResponse:
        """
        Send one request to the gateway

        Args:
            method: HTTP method
            url: Absolute request URL
            headers: Extra headers, merged over the session defaults
            body: JSON-serializable body; None sends no body

        Returns:
            HTTP response wrapper, whatever the status code

        Raises:
            TransportError: If no response could be obtained
        """
        start_time = time.time()
        request_id = self._generate_request_id()
        method = HttpMethod(method)

        request_headers = dict(self._session.headers)
        request_headers["X-Request-ID"] = request_id
        request_headers.update(headers)

        try:
            response = self._session.request(
                method.value,
                url,
                headers=request_headers,
                json=body,
                timeout=self.timeout / 1000.0,
            )
        except requests.exceptions.RequestException as e:
            self._log_audit(HttpAuditEntry(
                timestamp=datetime.now(timezone.utc).isoformat(),
                request_id=request_id,
                method=method.value,
                url=url,
                headers=self._redact_sensitive_data(request_headers),
                body=self._redact_sensitive_data(body),
                duration=int((time.time() - start_time) * 1000),
                error=str(e),
            ))
            raise self._normalize_error(e) from e

        duration = int((time.time() - start_time) * 1000)
        self._log_audit(HttpAuditEntry(
            timestamp=datetime.now(timezone.utc).isoformat(),
            request_id=request_id,
            method=method.value,
            url=url,
            headers=self._redact_sensitive_data(request_headers),
            body=self._redact_sensitive_data(body),
            status=response.status_code,
            duration=duration,
            success=response.ok,
        ))

        return HttpResponse(
            content=response.content,
            status=response.status_code,
            headers=dict(response.headers),
            duration=duration,
            request_id=request_id,
        )

    def close(self) -> None:
        """Close the HTTP session"""
        self._session.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
