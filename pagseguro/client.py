import logging
from typing import Optional

import httpx

from . import settings
from .errors import parse_error_response
from .models import Order

logger = logging.getLogger(__name__)


class PagSeguroClient:
    """Binding for the PagSeguro orders API.

    Holds configuration only; every call opens its own HTTP client, so one
    instance can be shared by concurrent tasks.
    """

    def __init__(
        self,
        base_url: str,
        token: str,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout = timeout
        self.transport = transport

    @classmethod
    def from_settings(cls, **kwargs) -> "PagSeguroClient":
        return cls(settings.PAGSEGURO_BASE_URL, settings.PAGSEGURO_TOKEN, **kwargs)

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": self.token,
            "Content-Type": "application/json",
        }

    def _timeout(self, timeout: Optional[float]) -> float:
        if timeout is not None:
            return timeout
        if self.timeout is not None:
            return self.timeout
        return settings.PAGSEGURO_TIMEOUT_SECONDS

    async def create_order(self, order: Order, timeout: Optional[float] = None) -> None:
        """Create an order with its charges.

        Returns on ``201 Created``. Any other status raises ``ApiErrors`` or
        ``NonStandardErrorResponse``; transport errors from httpx propagate as is.
        """
        url = f"{self.base_url}/orders"
        logger.info(
            "pagseguro_create_order",
            extra={
                "url": url,
                "reference_id": order.reference_id,
                "charges": len(order.charges or []),
            },
        )

        async with httpx.AsyncClient(transport=self.transport) as client:
            r = await client.post(
                url,
                content=order.to_json(),
                headers=self._headers(),
                timeout=self._timeout(timeout),
            )

        logger.info(
            "pagseguro_response",
            extra={"url": url, "method": "POST", "status_code": r.status_code},
        )
        if r.status_code == httpx.codes.CREATED:
            return None
        raise parse_error_response(r.status_code, r.content)
