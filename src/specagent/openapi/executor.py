"""
Name: Execution state machine.
Description: Drives a single API call through Preparing, Executing and a terminal Success or Error state, yielding one event per state. Every fault raised while building, sending or parsing becomes a terminal ErrorEvent.
"""

import logging
from typing import Any, AsyncIterator, Mapping, Optional

import httpx

from ..constants import (
    EXECUTING_MESSAGE,
    PREPARING_MESSAGE,
    PROTOCOL_FAILURE_MESSAGE,
    SUCCESS_MESSAGE,
    TRANSPORT_FAULT_MESSAGE,
)
from .builder import build_request
from .models import (
    CallDescription,
    ErrorEvent,
    ExecutionEvent,
    LoadingEvent,
    SuccessEvent,
)

logger = logging.getLogger(__name__)


def describe_exception(exc: BaseException) -> str:
    """Return a non-empty, human readable description of an exception."""
    text = str(exc).strip()
    return text or exc.__class__.__name__


def _error_payload(response: httpx.Response) -> Any:
    """Return the parsed JSON body of an error response, or its raw text."""
    try:
        return response.json()
    except ValueError:
        return response.text


async def execute_request(
    description: CallDescription,
    client: httpx.AsyncClient,
    default_headers: Optional[Mapping[str, str]] = None,
) -> AsyncIterator[ExecutionEvent]:
    """Execute a call and yield its progress and outcome.

    Args:
        description: The validated call description
        client: HTTP client used for the single request
        default_headers: Headers applied before the caller's own headers

    Yields:
        Zero or more LoadingEvents followed by exactly one SuccessEvent or ErrorEvent
    """
    yield LoadingEvent(message=PREPARING_MESSAGE)

    try:
        request = build_request(description, default_headers=default_headers)
    except Exception as e:
        logger.error(f"Could not build request for {description.endpoint}: {e}")
        yield ErrorEvent(error=describe_exception(e), message=TRANSPORT_FAULT_MESSAGE)
        return

    yield LoadingEvent(
        message=EXECUTING_MESSAGE.format(method=request.method, url=request.url)
    )

    try:
        logger.debug(f"Sending {request.method} {request.url}")
        response = await client.request(
            request.method,
            request.url,
            headers=request.headers,
            content=request.body,
        )
        logger.debug(f"{request.method} {request.url} returned {response.status_code}")

        if response.is_error:
            outcome = ErrorEvent(
                status_code=response.status_code,
                error=_error_payload(response),
                message=PROTOCOL_FAILURE_MESSAGE.format(
                    status_code=response.status_code
                ),
            )
        else:
            outcome = SuccessEvent(
                status_code=response.status_code,
                url=request.url,
                data=response.json(),
                message=SUCCESS_MESSAGE,
            )
    except Exception as e:
        logger.warning(f"{request.method} {request.url} failed: {e}")
        outcome = ErrorEvent(
            error=describe_exception(e), message=TRANSPORT_FAULT_MESSAGE
        )

    yield outcome
