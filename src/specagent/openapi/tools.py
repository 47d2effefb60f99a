"""
Name: OpenAPI invocation tool.
Description: Implements OpenAPITool, the generic LLM-compatible tool that calls any endpoint of an API described by an OpenAPI specification. The caller decides the base URL, path, method and parameters at call time; the tool validates them, builds the request and streams the execution events.
"""

import logging
from typing import Any, AsyncIterator, Dict, List, Mapping, Optional, Union

import anyio
import httpx

from ..constants import DEFAULT_TIMEOUT, DEFAULT_TOOL_DESCRIPTION, DEFAULT_TOOL_NAME
from .executor import execute_request
from .models import CallDescription, ExecutionEvent

logger = logging.getLogger(__name__)


class OpenAPITool:
    """Tool for making requests to any endpoint of an OpenAPI-described API."""

    def __init__(
        self,
        name: str = DEFAULT_TOOL_NAME,
        description: str = DEFAULT_TOOL_DESCRIPTION,
        default_headers: Optional[Mapping[str, str]] = None,
        timeout: Optional[float] = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the tool.

        Args:
            name: Name of the tool
            description: Description of the tool shown to the reasoning process
            default_headers: Headers sent with every call, overridden by the caller's headers
            timeout: Timeout in seconds for a single call, None to wait indefinitely
            transport: Optional httpx transport, mostly useful for tests
        """
        self.name = name
        self.description = description
        self.default_headers = dict(default_headers or {})
        self.timeout = timeout
        self._transport = transport

    def to_schema(self) -> Dict[str, Any]:
        """Convert the tool to a schema for LLM function calling.

        Returns:
            A schema for the tool
        """
        return {
            "name": self.name,
            "description": self.description,
            "parameters": CallDescription.model_json_schema(),
        }

    def invoke(
        self, description: Union[CallDescription, Mapping[str, Any]]
    ) -> AsyncIterator[ExecutionEvent]:
        """Start a single invocation.

        The input is validated before anything else happens, so a rejected
        call raises here and never produces a partial event sequence.

        Args:
            description: A CallDescription or a mapping with its fields

        Returns:
            A single-use async iterator of execution events

        Raises:
            pydantic.ValidationError: If the description is invalid
        """
        if not isinstance(description, CallDescription):
            description = CallDescription.model_validate(dict(description))
        return self._run(description)

    def invoke_async(self, **kwargs: Any) -> AsyncIterator[ExecutionEvent]:
        """Keyword form of :py:meth:`invoke`."""
        return self.invoke(kwargs)

    async def _run(self, description: CallDescription) -> AsyncIterator[ExecutionEvent]:
        logger.debug(
            f"Invoking {self.name}: {description.method} {description.endpoint}"
        )
        # Redirects are followed; the outcome describes the final response
        async with httpx.AsyncClient(
            timeout=self.timeout,
            transport=self._transport,
            follow_redirects=True,
        ) as client:
            async for event in execute_request(
                description, client, default_headers=self.default_headers
            ):
                yield event

    async def collect(
        self, description: Union[CallDescription, Mapping[str, Any]]
    ) -> List[ExecutionEvent]:
        """Run an invocation to completion.

        Args:
            description: A CallDescription or a mapping with its fields

        Returns:
            All events, the last one terminal
        """
        return [event async for event in self.invoke(description)]

    def execute(self, **kwargs: Any) -> List[ExecutionEvent]:
        """Execute the API request (synchronous wrapper).

        Args:
            **kwargs: Fields of the call description

        Returns:
            All events, the last one terminal
        """
        return anyio.run(self.collect, kwargs)


async def execute_tool(
    tool: OpenAPITool, arguments: Mapping[str, Any]
) -> Dict[str, Any]:
    """Execute the tool and return its terminal event.

    Args:
        tool: OpenAPITool instance
        arguments: Fields of the call description

    Returns:
        The terminal event as a dictionary

    Raises:
        ValueError: If the arguments are not a valid call description
    """
    events = await tool.collect(arguments)
    return events[-1].to_dict()
