"""
Invoice Service
Creates invoices, looks them up and refunds them

Invoice creation goes through these states:

    DRAFT -> SUBMITTED -> CREATED -> URL_COMPOSED

and any step before URL_COMPOSED may end in FAILED.

The insert call does not return the pay key, so every creation is
followed by a lookup of the new invoice before the payment URL can
be composed.
"""

import logging
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Union
from urllib.parse import urlencode

from sadad_pay.client.http_client import HttpMethod, Transport
from sadad_pay.config.sadad_config import GatewayEndpoints
from sadad_pay.exceptions import (
    InvoiceCreationError,
    InvoiceNotFoundError,
    RefundError,
)
from sadad_pay.models.invoice import (
    CreatedInvoice,
    InvoiceInfo,
    InvoiceRequest,
    RefundResult,
)
from sadad_pay.services._responses import is_blank, read_envelope, response_field
from sadad_pay.services.token_manager import TokenManager
from sadad_pay.utils.logger import Logger

logger = logging.getLogger(__name__)


class InvoiceState(str, Enum):
    """Invoice creation states"""
    DRAFT = "DRAFT"
    SUBMITTED = "SUBMITTED"
    CREATED = "CREATED"
    URL_COMPOSED = "URL_COMPOSED"
    FAILED = "FAILED"


def _first_reference(payload: Mapping[str, Any]) -> Optional[Any]:
    """Reference number of the first invoice line, used to tag audit lines"""
    lines = payload.get("Invoices")
    if isinstance(lines, list) and lines and isinstance(lines[0], Mapping):
        return lines[0].get("ref_Number")
    return None


class InvoiceService:
    """
    Invoice operations against the SadadPay API

    Every call mints its own access token through the TokenManager.
    """

    def __init__(
        self,
        transport: Transport,
        endpoints: GatewayEndpoints,
        token_manager: TokenManager,
        audit_log: Optional[Logger] = None,
    ) -> None:
        self._transport = transport
        self._endpoints = endpoints
        self._tokens = token_manager
        self._audit = audit_log or Logger()

    def create_invoice(
        self,
        request: Union[InvoiceRequest, Mapping[str, Any]],
        refresh_token: str,
    ) -> CreatedInvoice:
        """
        Create an invoice and compose its payment URL

        Args:
            request: Invoice payload; ``Invoices[0].ref_Number`` tags the audit log
            refresh_token: Token from TokenManager.acquire_refresh_token

        Returns:
            The new invoice id and the customer-facing payment URL

        Raises:
            GatewayError: If the gateway rejected the invoice
            InvoiceCreationError: If no invoice id came back
            InvoiceNotFoundError: If the follow-up lookup has no pay key
        """
        if isinstance(request, InvoiceRequest):
            payload = request.to_payload()
        else:
            payload = dict(request)
        reference = _first_reference(payload)

        state = InvoiceState.DRAFT
        try:
            self._audit.separator()
            self._audit.write(f"Create Invoice Request orderId# {reference}", payload)

            headers = self._tokens.authorization_headers(refresh_token)
            state = InvoiceState.SUBMITTED
            response = self._transport.send(
                HttpMethod.POST, self._endpoints.invoice_insert_url, headers, payload
            )
            self._audit.write(f"Create Invoice Response orderId# {reference}", response.json())
            envelope = read_envelope(response)

            invoice_id = response_field(envelope, "invoiceId")
            if is_blank(invoice_id):
                raise InvoiceCreationError(details={"ref_number": reference})
            state = InvoiceState.CREATED

            info = self.get_invoice_info(invoice_id, refresh_token)
            invoice_url = self._endpoints.pay_url(info.key)
            state = InvoiceState.URL_COMPOSED
        except Exception:
            logger.debug(
                "Invoice for orderId# %s moved from %s to %s",
                reference, state.value, InvoiceState.FAILED.value,
            )
            raise

        logger.debug("Invoice %s for orderId# %s reached %s", invoice_id, reference, state.value)
        return CreatedInvoice(invoice_id=invoice_id, invoice_url=invoice_url)

    def get_invoice_info(self, invoice_id: Union[int, str], refresh_token: str) -> InvoiceInfo:
        """
        Look up an invoice by id

        Raises:
            InvoiceNotFoundError: If the response has no pay key
        """
        self._audit.separator()
        self._audit.write(f"In Invoice Info inv# {invoice_id}")

        headers = self._tokens.authorization_headers(refresh_token)
        url = f"{self._endpoints.invoice_get_by_id_url}?{urlencode({'id': invoice_id})}"
        response = self._transport.send(HttpMethod.GET, url, headers)
        self._audit.write(f"inv# {invoice_id} response :", response.json())
        envelope = read_envelope(response)

        key = response_field(envelope, "key")
        if is_blank(key):
            raise InvoiceNotFoundError(invoice_id=invoice_id)

        return InvoiceInfo(key=str(key), payload=envelope)

    def refund_invoice(self, request: Mapping[str, Any], refresh_token: str) -> RefundResult:
        """
        Request a refund

        The request and the raw response are both written to the audit log.

        Raises:
            RefundError: If the response has no refund id
        """
        payload: Dict[str, Any] = dict(request)

        self._audit.separator()
        self._audit.write("Refund Invoice Request", payload)

        headers = self._tokens.authorization_headers(refresh_token)
        response = self._transport.send(
            HttpMethod.POST, self._endpoints.refund_insert_url, headers, payload
        )
        self._audit.write("Refund Invoice response", response.json())
        envelope = read_envelope(response)

        refund_id = response_field(envelope, "refund_Id")
        if is_blank(refund_id):
            raise RefundError()

        return RefundResult(refund_id=refund_id, payload=envelope)
