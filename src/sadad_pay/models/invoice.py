"""Invoice and refund models"""

from typing import Any, Dict, List, Union

from pydantic import BaseModel, Field


class InvoiceLine(BaseModel):
    """
    One invoice in a create request

    Only the reference number is known to the SDK; any other gateway
    field (amount, customer details, ...) passes through as extra data.
    """

    ref_number: Union[str, int] = Field(
        ..., alias="ref_Number", description="Merchant reference, e.g. order id"
    )

    model_config = {
        "populate_by_name": True,
        "extra": "allow",
    }


class InvoiceRequest(BaseModel):
    """Create-invoice request body"""

    invoices: List[InvoiceLine] = Field(..., alias="Invoices", min_length=1)

    model_config = {
        "populate_by_name": True,
        "extra": "allow",
    }

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


class CreatedInvoice(BaseModel):
    """Result of a successful invoice creation"""

    invoice_id: Union[int, str] = Field(..., description="Gateway invoice id")
    invoice_url: str = Field(..., description="Customer-facing payment URL")


class InvoiceInfo(BaseModel):
    """Invoice lookup result"""

    key: str = Field(..., description="Pay key used to build the payment URL")
    payload: Dict[str, Any] = Field(..., description="Full gateway response")

    @property
    def response(self) -> Dict[str, Any]:
        return self.payload.get("response") or {}


class RefundResult(BaseModel):
    """Refund request result"""

    refund_id: Union[int, str] = Field(..., description="Gateway refund id")
    payload: Dict[str, Any] = Field(..., description="Full gateway response")
