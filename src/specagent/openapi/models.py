"""Models describing a single API invocation and the events it produces."""

from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

Primitive = Union[str, int, float, bool, None]
QueryValue = Union[Primitive, List[Primitive]]


class CallDescription(BaseModel):
    """Caller-declared intent to invoke one HTTP endpoint."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    base_url: str = Field(
        description="Base URL for the API (extract from OpenAPI spec servers section or endpoint servers)"
    )
    endpoint: str = Field(
        description="The API endpoint path (e.g., /v1/forecast, /api/users)"
    )
    method: Literal["GET", "POST", "PUT", "DELETE", "PATCH"] = Field(
        description="HTTP method from the OpenAPI spec"
    )
    query_params: Optional[Dict[str, QueryValue]] = Field(
        default=None, description="Query parameters as key-value pairs"
    )
    body: Optional[Dict[str, Any]] = Field(
        default=None, description="Request body for POST/PUT/PATCH requests"
    )
    headers: Optional[Dict[str, str]] = Field(
        default=None,
        description="Additional headers (e.g., API keys, content-type)",
    )

    @field_validator("method", mode="before")
    @classmethod
    def normalize_method(cls, value: Any) -> Any:
        """Accept methods in any letter case."""
        if isinstance(value, str):
            return value.strip().upper()
        return value


class ResolvedRequest(BaseModel):
    """Transport-ready form of a CallDescription."""

    model_config = ConfigDict(frozen=True)

    method: str
    url: str
    headers: Dict[str, str]
    body: Optional[str] = None


class LoadingEvent(BaseModel):
    """Progress report emitted before the outcome is known."""

    state: Literal["loading"] = "loading"
    message: str

    @property
    def is_terminal(self) -> bool:
        return False

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")


class SuccessEvent(BaseModel):
    """Terminal event for a completed request with a JSON body."""

    state: Literal["success"] = "success"
    status_code: int
    url: str
    data: Any = None
    message: str

    @property
    def is_terminal(self) -> bool:
        return True

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")


class ErrorEvent(BaseModel):
    """Terminal event for a protocol failure or a transport fault.

    Protocol failures carry the status code and the payload returned by the
    service. Transport faults never obtained a response, so ``status_code``
    stays unset.
    """

    state: Literal["error"] = "error"
    status_code: Optional[int] = None
    error: Optional[Any] = None
    message: str

    @property
    def is_terminal(self) -> bool:
        return True

    def to_dict(self) -> Dict[str, Any]:
        data = self.model_dump(mode="json")
        if self.status_code is None:
            data.pop("status_code")
        if self.error is None:
            data.pop("error")
        return data


ExecutionEvent = Annotated[
    Union[LoadingEvent, SuccessEvent, ErrorEvent], Field(discriminator="state")
]
