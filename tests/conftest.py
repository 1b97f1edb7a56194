from typing import Optional

import httpx
import pytest
from faker import Faker

from pagseguro import PagSeguroClient
from pagseguro.models import (
    Address,
    Amount,
    Boleto,
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


def canned(status_code: int, body: str = "", seen: Optional[list] = None) -> httpx.MockTransport:
    """Transport answering every request with the same status and body."""

    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        return httpx.Response(
            status_code,
            content=body.encode("utf-8"),
            headers={"Content-Type": "application/json"},
        )

    return httpx.MockTransport(handler)


def client_for(status_code: int, body: str = "", token: str = "", seen: Optional[list] = None) -> PagSeguroClient:
    return PagSeguroClient("http://pagseguro.test", token, transport=canned(status_code, body, seen))


@pytest.fixture
def order(faker_ptbr) -> Order:
    return Order(
        reference_id="ex-00001",
        customer=Customer(
            name=faker_ptbr.name(),
            email=faker_ptbr.email(),
            tax_id="12345678909",
            phones=[Phone(country="55", area="11", number="999999999", type="MOBILE")],
        ),
        items=[
            Item(reference_id="referencia do item", name="nome do item", quantity=1, unit_amount=500),
        ],
        shipping=Shipping(
            address=Address(
                street="Avenida Brigadeiro Faria Lima",
                number="1384",
                locality="Pinheiros",
                city="São Paulo",
                region="São Paulo",
                region_code="SP",
                country="BRA",
                postal_code="01452002",
            )
        ),
        notification_urls=["https://meusite.com/notificacoes"],
        charges=[
            Charge(
                reference_id="referencia da cobranca",
                description="descricao da cobranca",
                amount=Amount(value=500, currency="BRL"),
                payment_method=PaymentMethod(
                    type="BOLETO",
                    boleto=Boleto(
                        due_date="2024-12-31",
                        instruction_lines=InstructionLines(
                            line_1="Pagamento processado para DESC Fatura",
                            line_2="Via PagSeguro",
                        ),
                        holder=Holder(
                            name="Jose da Silva",
                            tax_id="22222222222",
                            email="jose@email.com",
                            address=Address(
                                country="Brasil",
                                region="São Paulo",
                                region_code="SP",
                                city="Sao Paulo",
                                postal_code="01452002",
                                street="Avenida Brigadeiro Faria Lima",
                                number="1384",
                                locality="Pinheiros",
                            ),
                        ),
                    ),
                ),
            )
        ],
    )


@pytest.fixture
def make_client():
    return client_for


@pytest.fixture
def faker_ptbr():
    return Faker("pt_BR")


@pytest.fixture
def token(faker_ptbr) -> str:
    return faker_ptbr.pystr(min_chars=60, max_chars=60)
