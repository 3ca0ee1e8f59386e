"""Helpers for reading the gateway JSON envelope"""

from typing import Any, Dict

from sadad_pay.client.http_client import HttpResponse
from sadad_pay.exceptions import GatewayError


def is_blank(value: Any) -> bool:
    """True for values the gateway uses to mean "absent": None, "", "0", 0, [] and {}"""
    return not value or value == "0"


def decode_envelope(response: HttpResponse) -> Dict[str, Any]:
    """
    Decode a gateway response envelope without interpreting it

    A body that is not a JSON object decodes to an empty envelope, so the
    caller's missing-field check fails it.
    """
    payload = response.json()
    if not isinstance(payload, dict):
        return {}
    return payload


def read_envelope(response: HttpResponse) -> Dict[str, Any]:
    """
    Decode a gateway response envelope

    A non-empty ``errorKey`` wins over anything else in the body and is
    raised as GatewayError.
    """
    payload = decode_envelope(response)

    error_key = payload.get("errorKey")
    if not is_blank(error_key):
        raise GatewayError(error_key, status_code=response.status)

    return payload


def response_field(payload: Dict[str, Any], name: str) -> Any:
    """Read ``payload["response"][name]``, or None if any level is missing"""
    body = payload.get("response")
    if isinstance(body, dict):
        return body.get(name)
    return None
