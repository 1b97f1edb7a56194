from .client import PagSeguroClient
from .errors import (
    ApiError,
    ApiErrors,
    NonStandardErrorResponse,
    PagSeguroError,
    parse_error_response,
)
from .models import (
    Address,
    Amount,
    Boleto,
    Card,
    CardHolder,
    Charge,
    Customer,
    Holder,
    InstructionLines,
    Item,
    Order,
    PaymentMethod,
    Phone,
    Shipping,
)

__all__ = [
    "PagSeguroClient",
    "ApiError",
    "ApiErrors",
    "NonStandardErrorResponse",
    "PagSeguroError",
    "parse_error_response",
    "Address",
    "Amount",
    "Boleto",
    "Card",
    "CardHolder",
    "Charge",
    "Customer",
    "Holder",
    "InstructionLines",
    "Item",
    "Order",
    "PaymentMethod",
    "Phone",
    "Shipping",
]
