"""OpenAPI invocation module for specagent."""

from .builder import build_request
from .executor import execute_request
from .models import (
    CallDescription,
    ErrorEvent,
    ExecutionEvent,
    LoadingEvent,
    ResolvedRequest,
    SuccessEvent,
)
from .tools import OpenAPITool, execute_tool

__all__ = [
    "build_request",
    "execute_request",
    "execute_tool",
    "CallDescription",
    "ErrorEvent",
    "ExecutionEvent",
    "LoadingEvent",
    "OpenAPITool",
    "ResolvedRequest",
    "SuccessEvent",
]
