"""Typed errors for PagSeguro error responses.

The API answers validation failures with one of two envelopes:

* a single error ``{"code", "description", "parameter_name"}`` (order level);
* a list ``{"error_messages": [...]}`` (charge and payment method level).

Anything else is reported as a non-standard response.
"""

from pydantic import BaseModel, Field, ValidationError, field_validator
from typing import Union

NON_STANDARD_HINT = "non-standard error response, contact pagseguro support"


class ApiError(BaseModel):
    code: str
    description: str
    parameter_name: str = ""

    @field_validator("parameter_name", mode="before")
    @classmethod
    def _null_parameter_name(cls, v):
        return "" if v is None else v

class ErrorMessages(BaseModel):
    error_messages: list[ApiError] = Field(min_length=1)

class PagSeguroError(Exception):
    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        super().__init__(message)

class ApiErrors(PagSeguroError):
    """One or more validation problems reported by the API."""

    def __init__(self, status_code: int, error_messages: list[ApiError]):
        self.error_messages = list(error_messages)
        super().__init__(status_code, f"error processing request(http status code: {status_code})")

class NonStandardErrorResponse(PagSeguroError):
    def __init__(self, status_code: int):
        super().__init__(
            status_code,
            f"error processing request(http status code: {status_code}): {NON_STANDARD_HINT}",
        )


def parse_error_response(status_code: int, body: Union[bytes, str]) -> PagSeguroError:
    try:
        single = ApiError.model_validate_json(body)
    except ValidationError:
        pass
    else:
        return ApiErrors(status_code, [single])

    try:
        multiple = ErrorMessages.model_validate_json(body)
    except ValidationError:
        pass
    else:
        return ApiErrors(status_code, multiple.error_messages)

    return NonStandardErrorResponse(status_code)
