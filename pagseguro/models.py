from pydantic import BaseModel
from typing import Optional

# Every field is optional: the payload goes out exactly as the caller built it
# and the API does the validation.


class Phone(BaseModel):
    country: Optional[str] = None
    area: Optional[str] = None
    number: Optional[str] = None
    type: Optional[str] = None

class Customer(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    tax_id: Optional[str] = None
    phones: Optional[list[Phone]] = None

class Item(BaseModel):
    reference_id: Optional[str] = None
    name: Optional[str] = None
    quantity: Optional[int] = None
    unit_amount: Optional[int] = None

class Address(BaseModel):
    street: Optional[str] = None
    number: Optional[str] = None
    complement: Optional[str] = None
    locality: Optional[str] = None
    city: Optional[str] = None
    region: Optional[str] = None
    region_code: Optional[str] = None
    country: Optional[str] = None
    postal_code: Optional[str] = None

class Shipping(BaseModel):
    address: Optional[Address] = None

class Amount(BaseModel):
    value: Optional[int] = None
    currency: Optional[str] = None

class InstructionLines(BaseModel):
    line_1: Optional[str] = None
    line_2: Optional[str] = None

class Holder(BaseModel):
    name: Optional[str] = None
    tax_id: Optional[str] = None
    email: Optional[str] = None
    address: Optional[Address] = None

class Boleto(BaseModel):
    due_date: Optional[str] = None
    instruction_lines: Optional[InstructionLines] = None
    holder: Optional[Holder] = None

class CardHolder(BaseModel):
    name: Optional[str] = None

class Card(BaseModel):
    encrypted: Optional[str] = None
    number: Optional[str] = None
    exp_month: Optional[str] = None
    exp_year: Optional[str] = None
    security_code: Optional[str] = None
    holder: Optional[CardHolder] = None
    store: Optional[bool] = None

class PaymentMethod(BaseModel):
    type: Optional[str] = None
    installments: Optional[int] = None
    capture: Optional[bool] = None
    soft_descriptor: Optional[str] = None
    boleto: Optional[Boleto] = None
    card: Optional[Card] = None

class Charge(BaseModel):
    reference_id: Optional[str] = None
    description: Optional[str] = None
    amount: Optional[Amount] = None
    payment_method: Optional[PaymentMethod] = None

class Order(BaseModel):
    reference_id: Optional[str] = None
    customer: Optional[Customer] = None
    items: Optional[list[Item]] = None
    shipping: Optional[Shipping] = None
    notification_urls: Optional[list[str]] = None
    charges: Optional[list[Charge]] = None

    def to_json(self) -> bytes:
        """Request body for ``POST /orders``; unset fields are left out."""
        return self.model_dump_json(exclude_none=True).encode("utf-8")
