"""Event rendering for operation generators."""

from collections.abc import Generator
from typing import TypeVar

from devscripts.events import CompletionEvent, ProgressEvent
from devscripts.output import format_error, format_status, format_warning, user_output

T = TypeVar("T")

# Marker formatting per progress event style
STYLE_FORMATTERS = {
    "info": format_status,
    "success": format_status,
    "warning": format_warning,
    "error": format_error,
}


def render_events(
    events: Generator[ProgressEvent | CompletionEvent[T]],
) -> T:
    """Consume event stream, render progress to stderr, return result.

    Args:
        events: Generator yielding ProgressEvent and CompletionEvent

    Returns:
        The result from the final CompletionEvent

    Raises:
        RuntimeError: If operation ends without a CompletionEvent
    """
    for event in events:
        match event:
            case ProgressEvent(message=msg, style=style):
                user_output(STYLE_FORMATTERS[style](msg))
            case CompletionEvent(result=result):
                return result
    raise RuntimeError("Operation ended without completion")
