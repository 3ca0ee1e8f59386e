"""Currency rate model"""

from decimal import Decimal

from pydantic import BaseModel, Field


class CurrencyRate(BaseModel):
    """One entry of the gateway currency list"""

    code: str = Field(..., description="Currency code, e.g. USD")
    conversion_rate: Decimal = Field(
        ..., alias="conversionRate", gt=0, description="Units of settlement currency per unit"
    )
    decimal_placement: int = Field(
        ..., alias="decimalPlacement", ge=0, description="Digits after the decimal point"
    )

    model_config = {
        "populate_by_name": True,
        "extra": "allow",
    }

    def matches(self, code: str) -> bool:
        return self.code.lower() == code.lower()
