"""
Currency Service
Loads the gateway currency list and converts amounts into the
settlement currency (KWD)
"""

import logging
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import List, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from sadad_pay.client.http_client import HttpClient, HttpMethod, Transport
from sadad_pay.config.sadad_config import GatewayEndpoints
from sadad_pay.exceptions import CurrencyNotFoundError, RateFetchError
from sadad_pay.models.currency import CurrencyRate
from sadad_pay.services._responses import read_envelope

logger = logging.getLogger(__name__)

SETTLEMENT_CURRENCY = "KWD"

Amount = Union[Decimal, int, float, str]


def _to_decimal(amount: Amount) -> Decimal:
    # floats go through str() so 10.1 stays 10.1 and not its binary expansion
    if isinstance(amount, float):
        amount = str(amount)
    try:
        value = Decimal(amount)
    except (InvalidOperation, TypeError) as e:
        raise ValueError(f"Invalid amount: {amount!r}") from e
    if not value.is_finite():
        raise ValueError(f"Invalid amount: {amount!r}")
    return value


def round_to_places(value: Decimal, places: int) -> str:
    """
    Round half away from zero and format without exponent

    Example:
        >>> round_to_places(Decimal("3.0005"), 3)
        '3.001'
    """
    quantum = Decimal(1).scaleb(-places)
    return format(value.quantize(quantum, rounding=ROUND_HALF_UP), "f")


class CurrencyRateTable:
    """
    Gateway currency list

    The list endpoint needs no authentication. Nothing is cached:
    every lookup fetches the current list.
    """

    def __init__(self, transport: Transport, endpoints: GatewayEndpoints) -> None:
        self._transport = transport
        self._endpoints = endpoints

    def fetch_rates(self) -> List[CurrencyRate]:
        """
        Fetch the currency list in gateway order

        Raises:
            RateFetchError: If the HTTP status is not a success or the list is malformed
            GatewayError: If the gateway answered with an error key
        """
        response = self._transport.send(
            HttpMethod.GET, self._endpoints.currency_list_url, {}
        )
        if not response.ok:
            raise RateFetchError(status_code=response.status)

        payload = read_envelope(response)
        entries = payload.get("response")
        if not isinstance(entries, list):
            raise RateFetchError("Sadad currency list is missing from the response")

        try:
            rates = [CurrencyRate.model_validate(entry) for entry in entries]
        except PydanticValidationError as e:
            raise RateFetchError("Sadad currency list is malformed", cause=e) from e

        logger.debug("Loaded %d currency rates", len(rates))
        return rates

    def find(self, code: str) -> Optional[CurrencyRate]:
        """First rate whose code matches case-insensitively, or None"""
        return next((rate for rate in self.fetch_rates() if rate.matches(code)), None)


class CurrencyConverter:
    """Converts amounts into the settlement currency"""

    def __init__(self, rate_table: CurrencyRateTable) -> None:
        self._rates = rate_table

    def convert(self, currency: str, amount: Amount) -> str:
        """
        Convert an amount into KWD using the gateway rate

        The result is rounded to the currency's decimal placement and
        returned as a fixed-point string, e.g. ``"3.000"``.

        Args:
            currency: Source currency code, any case
            amount: Amount in the source currency

        Raises:
            CurrencyNotFoundError: If the currency is not listed, or the
                converted amount rounds to zero
        """
        value = _to_decimal(amount)
        rate = self._rates.find(currency)
        if rate is None:
            raise CurrencyNotFoundError(currency)

        converted = round_to_places(value * rate.conversion_rate, rate.decimal_placement)

        # A zero result is reported as an unusable currency, even when the
        # amount itself was zero
        if Decimal(converted) == 0:
            raise CurrencyNotFoundError(currency)

        return converted


def get_currency_list(sandbox_mode: bool) -> List[CurrencyRate]:
    """Fetch the currency list without building a client"""
    with HttpClient() as transport:
        return CurrencyRateTable(transport, GatewayEndpoints.for_mode(sandbox_mode)).fetch_rates()


def get_kwd_amount(currency: str, amount: Amount, sandbox_mode: bool = False) -> str:
    """Convert an amount into KWD without building a client"""
    with HttpClient() as transport:
        table = CurrencyRateTable(transport, GatewayEndpoints.for_mode(sandbox_mode))
        return CurrencyConverter(table).convert(currency, amount)
