"""Local stand-in for the PagSeguro orders API.

Run with ``uvicorn pagseguro.sandbox:app`` and point ``PAGSEGURO_BASE_URL`` at it.
"""

from datetime import datetime, timezone
from typing import Optional
import random
import uuid

from fastapi import FastAPI, Header
from fastapi.responses import JSONResponse, Response

from . import settings
from .models import Charge, Order

PAYMENT_METHOD_TYPES = ("BOLETO", "CREDIT_CARD", "DEBIT_CARD", "PIX")


def _error(code: str, description: str, parameter_name: str = "") -> dict:
    err = {"code": code, "description": description}
    if parameter_name:
        err["parameter_name"] = parameter_name
    return err


def charge_errors(charge: Charge) -> list[dict]:
    errors = []
    if charge.amount is None or charge.amount.value is None:
        errors.append(_error("40001", "required_parameter", "amount.value"))

    method = charge.payment_method
    if method is None:
        errors.append(_error("40001", "required_parameter", "payment_method"))
        return errors
    if not method.type:
        errors.append(_error("40001", "required_parameter", "payment_method.type"))
    elif method.type not in PAYMENT_METHOD_TYPES:
        errors.append(_error("40002", "invalid_parameter", "payment_method.type"))
    elif method.type == "CREDIT_CARD" and method.capture is None:
        errors.append(_error("40001", "required_parameter", "payment_method.capture"))
    return errors


def create_app(failure_rate: Optional[float] = None) -> FastAPI:
    if failure_rate is None:
        failure_rate = settings.SANDBOX_FAILURE_RATE

    app = FastAPI(title="PagSeguro Sandbox", version="0.1.0")

    @app.get("/health")
    def health():
        return {"ok": True}

    @app.post("/orders")
    async def create_order(order: Order, authorization: str = Header(None, alias="Authorization")):
        if not authorization:
            return JSONResponse(
                status_code=401,
                content={
                    "error_messages": [
                        _error("UNAUTHORIZED", "Invalid credential. Review AUTHORIZATION header"),
                    ]
                },
            )

        # Simulated outage: the real API answers these with an empty body
        if random.random() < failure_rate:
            return Response(status_code=500)

        if not order.charges:
            return JSONResponse(
                status_code=400,
                content=_error("40001", "required_parameter", "payment_methods_is_required"),
            )

        errors = [err for charge in order.charges for err in charge_errors(charge)]
        if errors:
            return JSONResponse(status_code=400, content={"error_messages": errors})

        created = order.model_dump(exclude_none=True)
        created["id"] = f"ORDE_{uuid.uuid4().hex.upper()}"
        created["created_at"] = datetime.now(timezone.utc).isoformat(timespec="seconds")
        return JSONResponse(status_code=201, content=created)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
