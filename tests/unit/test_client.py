"""
SadadClient Unit Tests
"""

import threading

import pytest

import sadad_pay
from sadad_pay import SadadClient
from sadad_pay.client.http_client import HttpClient
from sadad_pay.config import SadadConfig
from sadad_pay.exceptions import (
    ConfigurationError,
    CurrencyNotFoundError,
    SadadErrorCategory,
)

ACCESS = {"response": {"accessToken": "access-xyz"}}


@pytest.fixture
def client(config_data: dict, transport) -> SadadClient:
    return SadadClient(config_data, transport=transport)


class TestClientConstruction:
    """Tests for building a client"""

    def test_from_dict(self, client: SadadClient):
        assert client.sandbox_mode is True
        assert client.config.client_id == "client-123"
        assert client.endpoints.api_base_url == "https://apisandbox.sadadpay.net/api"

    def test_from_config(self, sandbox_config: SadadConfig, transport):
        client = SadadClient(sandbox_config, transport=transport)
        assert client.config is sandbox_config

    @pytest.mark.parametrize("missing", ["client_id", "client_secret", "sandbox_mode"])
    def test_missing_field_fails_before_network(self, config_data: dict, transport, missing: str):
        del config_data[missing]

        with pytest.raises(ConfigurationError) as exc_info:
            SadadClient(config_data, transport=transport)

        assert exc_info.value.is_category(SadadErrorCategory.CONFIG)
        assert transport.calls == []

    def test_sandbox_mode_must_be_bool(self, config_data: dict, transport):
        config_data["sandbox_mode"] = "false"

        with pytest.raises(ConfigurationError):
            SadadClient(config_data, transport=transport)

    def test_rejects_non_mapping(self, transport):
        with pytest.raises(ConfigurationError):
            SadadClient(None, transport=transport)

    def test_default_transport(self, config_data: dict):
        with SadadClient(config_data) as client:
            assert isinstance(client._transport, HttpClient)
            assert client._transport.timeout == client.config.timeout

    def test_repr_hides_secret(self, client: SadadClient):
        assert "secret-456" not in repr(client)

    def test_separate_clients_keep_separate_endpoints(self, config_data: dict, transport):
        live = SadadClient({**config_data, "sandbox_mode": False}, transport=transport)
        sandbox = SadadClient(config_data, transport=transport)

        assert live.endpoints.pay_base_url == "https://sadadpay.net/pay"
        assert sandbox.endpoints.pay_base_url == "https://sandbox.sadadpay.net/pay"


class TestClientOperations:
    """End-to-end flows through the composition root"""

    def test_full_invoice_flow(self, client: SadadClient, transport):
        transport.queue({"response": {"refreshToken": "refresh-abc"}})
        transport.queue(ACCESS)
        transport.queue({"response": {"invoiceId": 42}})
        transport.queue(ACCESS)
        transport.queue({"response": {"key": "K42"}})

        refresh_token = client.acquire_refresh_token()
        invoice = client.create_invoice({"Invoices": [{"ref_Number": "A1"}]}, refresh_token)

        assert invoice.invoice_id == 42
        assert invoice.invoice_url == "https://sandbox.sadadpay.net/pay/K42"
        assert len(transport.calls) == 5

    def test_refund(self, client: SadadClient, transport):
        transport.queue(ACCESS)
        transport.queue({"response": {"refund_Id": "R-1"}})

        result = client.refund_invoice({"invoiceId": 42}, "refresh-abc")

        assert result.refund_id == "R-1"

    def test_get_invoice_info(self, client: SadadClient, transport):
        transport.queue(ACCESS)
        transport.queue({"response": {"key": "K42"}})

        assert client.get_invoice_info(42, "refresh-abc").key == "K42"

    def test_mint_access_token(self, client: SadadClient, transport):
        transport.queue(ACCESS)

        assert client.mint_access_token("refresh-abc") == "access-xyz"

    def test_currency_conversion(self, client: SadadClient, transport):
        rates = {"response": [{"code": "USD", "conversionRate": 0.30, "decimalPlacement": 3}]}
        transport.queue(rates)
        transport.queue(rates)
        transport.queue(rates)

        assert [rate.code for rate in client.get_currency_list()] == ["USD"]
        assert client.convert_amount("usd", 10) == "3.000"
        with pytest.raises(CurrencyNotFoundError):
            client.convert_amount("KWX", 10)

    def test_audit_log_written_to_config_path(self, config_data: dict, transport, tmp_path):
        log_path = tmp_path / "audit" / "sadad.log"
        client = SadadClient({**config_data, "log_path": str(log_path)}, transport=transport)
        transport.queue(ACCESS)
        transport.queue({"response": {"refund_Id": 9}})

        client.refund_invoice({"invoiceId": 42}, "refresh-abc")
        client.close()

        assert "Refund Invoice Request" in log_path.read_text(encoding="utf-8")

    def test_concurrent_calls_share_client(self, client: SadadClient, transport):
        lock = threading.Lock()
        original_send = transport.send

        def locked_send(*args, **kwargs):
            with lock:
                return original_send(*args, **kwargs)

        transport.send = locked_send
        for _ in range(8):
            transport.queue(ACCESS)

        results = []

        def mint():
            results.append(client.mint_access_token("refresh-abc"))

        threads = [threading.Thread(target=mint) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert results == ["access-xyz"] * 8


class TestPackageExports:
    """Tests for the public package surface"""

    def test_helpers_exported(self):
        assert sadad_pay.validate_phone("00 965 1234567") == "9651234567"
        assert sadad_pay.normalize_digits("٣٤٥") == "345"
        assert callable(sadad_pay.get_kwd_amount)
        assert callable(sadad_pay.get_currency_list)
        assert sadad_pay.SETTLEMENT_CURRENCY == "KWD"
