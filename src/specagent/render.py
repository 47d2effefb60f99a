"""
Name: Result renderer.
Description: Maps execution events, pending tool input and out-of-band rejections to plain-text output for terminals and chat transcripts.
"""

import json
from typing import Any, Mapping

from pydantic import ValidationError

from .openapi.models import ErrorEvent, ExecutionEvent, LoadingEvent, SuccessEvent


def _pretty(value: Any) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False, default=str)


def render_pending(arguments: Mapping[str, Any], complete: bool = True) -> str:
    """Render tool input before any event exists.

    Args:
        arguments: The tool arguments received so far
        complete: False while the arguments are still being streamed in

    Returns:
        The rendered text
    """
    if not complete:
        return _pretty(dict(arguments))
    return f"Preparing API call to {arguments.get('endpoint', '')}..."


def render_event(event: ExecutionEvent) -> str:
    """Render a single execution event.

    Args:
        event: Loading, success or error event

    Returns:
        The rendered text
    """
    if isinstance(event, LoadingEvent):
        return f"🔄 {event.message or 'Loading...'}"

    if isinstance(event, ErrorEvent):
        lines = ["❌ API Error", event.message]
        if event.status_code is not None:
            lines.append(f"Status Code: {event.status_code}")
        if event.error is not None:
            lines.append(_pretty(event.error))
        return "\n".join(lines)

    if isinstance(event, SuccessEvent):
        return "\n".join(
            [f"✅ {event.message}", event.url, _pretty(event.data)]
        )

    return "Processing API request..."


def render_rejection(exc: Exception) -> str:
    """Render a tool call that could not be run at all.

    Args:
        exc: The exception raised while validating the tool input

    Returns:
        The rendered text
    """
    if isinstance(exc, ValidationError):
        details = [
            f"{'.'.join(str(part) for part in err['loc']) or 'input'}: {err['msg']}"
            for err in exc.errors()
        ]
        return "❌ Error: invalid tool input\n" + "\n".join(
            f"  - {detail}" for detail in details
        )
    return f"❌ Error: {exc}"
