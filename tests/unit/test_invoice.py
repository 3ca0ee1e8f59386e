"""
Invoice Service Unit Tests
"""

import pytest

from sadad_pay.client.http_client import HttpMethod
from sadad_pay.config import SadadConfig
from sadad_pay.exceptions import (
    AuthenticationError,
    GatewayError,
    InvoiceCreationError,
    InvoiceNotFoundError,
    RefundError,
)
from sadad_pay.models import InvoiceLine, InvoiceRequest
from sadad_pay.services import InvoiceService, TokenManager
from sadad_pay.utils import Logger

API = "https://apisandbox.sadadpay.net/api"
ACCESS = {"response": {"accessToken": "access-xyz"}}


@pytest.fixture
def audit_path(tmp_path):
    return tmp_path / "logs" / "sadad.log"


@pytest.fixture
def service(sandbox_config: SadadConfig, transport, audit_path) -> InvoiceService:
    endpoints = sandbox_config.get_endpoints()
    tokens = TokenManager(sandbox_config, transport, endpoints)
    return InvoiceService(transport, endpoints, tokens, Logger(audit_path))


@pytest.fixture
def invoice_request() -> dict:
    return {
        "Invoices": [
            {"ref_Number": "ORD-1001", "amount": 12.5, "customer_Name": "Ali"},
            {"ref_Number": "ORD-1002", "amount": 3},
        ],
    }


class TestCreateInvoice:
    """Tests for InvoiceService.create_invoice"""

    def test_creates_and_composes_url(self, service: InvoiceService, transport, invoice_request):
        transport.queue(ACCESS)
        transport.queue({"response": {"invoiceId": 777}})
        transport.queue(ACCESS)
        transport.queue({"response": {"key": "PAYKEY9"}})

        result = service.create_invoice(invoice_request, "refresh-abc")

        assert result.invoice_id == 777
        assert result.invoice_url == "https://sandbox.sadadpay.net/pay/PAYKEY9"

    def test_call_order(self, service: InvoiceService, transport, invoice_request):
        transport.queue(ACCESS)
        transport.queue({"response": {"invoiceId": 777}})
        transport.queue(ACCESS)
        transport.queue({"response": {"key": "PAYKEY9"}})

        service.create_invoice(invoice_request, "refresh-abc")

        assert transport.urls == [
            f"{API}/User/GenerateAccessToken",
            f"{API}/Invoice/insert",
            f"{API}/User/GenerateAccessToken",
            f"{API}/Invoice/getbyid?id=777",
        ]
        insert = transport.calls[1]
        assert insert.method == HttpMethod.POST
        assert insert.headers["Authorization"] == "Bearer access-xyz"
        assert insert.body == invoice_request
        assert transport.calls[3].method == HttpMethod.GET

    def test_accepts_typed_request(self, service: InvoiceService, transport):
        request = InvoiceRequest(invoices=[InvoiceLine(ref_number="ORD-7", amount=5)])
        transport.queue(ACCESS)
        transport.queue({"response": {"invoiceId": "INV-7"}})
        transport.queue(ACCESS)
        transport.queue({"response": {"key": "K7"}})

        result = service.create_invoice(request, "refresh-abc")

        assert transport.calls[1].body == {"Invoices": [{"ref_Number": "ORD-7", "amount": 5}]}
        assert result.invoice_id == "INV-7"

    def test_missing_invoice_id_stops_before_lookup(self, service: InvoiceService, transport, invoice_request):
        transport.queue(ACCESS)
        transport.queue({"response": {"status": "pending"}})

        with pytest.raises(InvoiceCreationError):
            service.create_invoice(invoice_request, "refresh-abc")

        assert len(transport.calls) == 2
        assert not any("getbyid" in url for url in transport.urls)

    def test_error_key_short_circuits(self, service: InvoiceService, transport, invoice_request):
        transport.queue(ACCESS)
        transport.queue({"errorKey": "InvalidAmount", "response": {"invoiceId": 777}})

        with pytest.raises(GatewayError) as exc_info:
            service.create_invoice(invoice_request, "refresh-abc")

        assert exc_info.value.error_key == "InvalidAmount"
        assert str(exc_info.value) == "InvalidAmount"
        assert len(transport.calls) == 2

    def test_missing_pay_key_fails(self, service: InvoiceService, transport, invoice_request):
        transport.queue(ACCESS)
        transport.queue({"response": {"invoiceId": 777}})
        transport.queue(ACCESS)
        transport.queue({"response": {}})

        with pytest.raises(InvoiceNotFoundError) as exc_info:
            service.create_invoice(invoice_request, "refresh-abc")

        assert exc_info.value.invoice_id == 777

    def test_access_token_failure_prevents_insert(self, service: InvoiceService, transport, invoice_request):
        transport.queue({"response": {}})

        with pytest.raises(AuthenticationError):
            service.create_invoice(invoice_request, "refresh-abc")

        assert transport.urls == [f"{API}/User/GenerateAccessToken"]

    def test_audit_log_tagged_with_first_reference(
        self, service: InvoiceService, transport, invoice_request, audit_path
    ):
        transport.queue(ACCESS)
        transport.queue({"response": {"invoiceId": 777}})
        transport.queue(ACCESS)
        transport.queue({"response": {"key": "PAYKEY9"}})

        service.create_invoice(invoice_request, "refresh-abc")

        log = audit_path.read_text(encoding="utf-8")
        assert "Create Invoice Request orderId# ORD-1001" in log
        assert "Create Invoice Response orderId# ORD-1001" in log
        assert "ORD-1002" in log  # full request body is logged
        assert "In Invoice Info inv# 777" in log
        assert "refresh-abc" not in log

    def test_request_not_mutated(self, service: InvoiceService, transport, invoice_request):
        snapshot = {"Invoices": [dict(line) for line in invoice_request["Invoices"]]}
        transport.queue(ACCESS)
        transport.queue({"response": {"invoiceId": 777}})
        transport.queue(ACCESS)
        transport.queue({"response": {"key": "PAYKEY9"}})

        service.create_invoice(invoice_request, "refresh-abc")

        assert invoice_request == snapshot


class TestGetInvoiceInfo:
    """Tests for InvoiceService.get_invoice_info"""

    def test_returns_key_and_full_payload(self, service: InvoiceService, transport):
        payload = {
            "response": {"key": "PAYKEY9", "amount": 12.5, "newField": {"x": 1}},
            "isValid": True,
        }
        transport.queue(ACCESS)
        transport.queue(payload)

        info = service.get_invoice_info(777, "refresh-abc")

        assert info.key == "PAYKEY9"
        assert info.payload == payload
        assert info.response["newField"] == {"x": 1}

    def test_missing_key_fails(self, service: InvoiceService, transport):
        transport.queue(ACCESS)
        transport.queue({"response": {"key": ""}})

        with pytest.raises(InvoiceNotFoundError):
            service.get_invoice_info(777, "refresh-abc")

    def test_error_key_wins_over_key(self, service: InvoiceService, transport):
        transport.queue(ACCESS)
        transport.queue({"errorKey": "InvoiceNotFound", "response": {"key": "PAYKEY9"}})

        with pytest.raises(GatewayError):
            service.get_invoice_info(777, "refresh-abc")


class TestRefundInvoice:
    """Tests for InvoiceService.refund_invoice"""

    @pytest.fixture
    def refund_request(self) -> dict:
        return {"invoiceId": 777, "refundAmount": 5, "reason": "damaged"}

    def test_returns_refund_id(self, service: InvoiceService, transport, refund_request):
        transport.queue(ACCESS)
        transport.queue({"response": {"refund_Id": 55, "status": "queued"}})

        result = service.refund_invoice(refund_request, "refresh-abc")

        assert result.refund_id == 55
        assert result.payload["response"]["status"] == "queued"
        call = transport.calls[1]
        assert call.url == f"{API}/Refund/insert"
        assert call.method == HttpMethod.POST
        assert call.body == refund_request

    def test_missing_refund_id_fails(self, service: InvoiceService, transport, refund_request):
        transport.queue(ACCESS)
        transport.queue({"response": {"refund_Id": 0}})

        with pytest.raises(RefundError):
            service.refund_invoice(refund_request, "refresh-abc")

    def test_request_and_response_are_audited(
        self, service: InvoiceService, transport, refund_request, audit_path
    ):
        transport.queue(ACCESS)
        transport.queue({"response": {}})

        with pytest.raises(RefundError):
            service.refund_invoice(refund_request, "refresh-abc")

        log = audit_path.read_text(encoding="utf-8")
        assert 'Refund Invoice Request {"invoiceId": 777' in log
        assert "Refund Invoice response" in log


class TestAuditLogDisabled:
    """Without a log path the service writes nothing"""

    def test_no_log_file(self, sandbox_config: SadadConfig, transport, tmp_path, invoice_request):
        endpoints = sandbox_config.get_endpoints()
        service = InvoiceService(transport, endpoints, TokenManager(sandbox_config, transport, endpoints))
        transport.queue(ACCESS)
        transport.queue({"response": {"invoiceId": 1}})
        transport.queue(ACCESS)
        transport.queue({"response": {"key": "K"}})

        service.create_invoice(invoice_request, "refresh-abc")

        assert list(tmp_path.iterdir()) == []
