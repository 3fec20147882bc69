"""Stack capture for root error kinds.

The root initializer records the caller's call stack on every new instance.
Line 0 of the captured stack always holds the live str() rendering of the
error; writes to ``code`` or ``message`` re-render it.
"""

from __future__ import annotations

import sys
import traceback
from collections.abc import Mapping
from typing import Any, Optional

from errorkind.config import CaptureOptions

# Frames from these modules belong to instance construction, not the caller
_INTERNAL_MODULES = frozenset({"errorkind.kinds", "errorkind.stack"})


def _format_frame(frame: traceback.FrameSummary) -> str:
    return f'  File "{frame.filename}", line {frame.lineno}, in {frame.name}'


def capture_stack(limit: Optional[int]) -> list[str]:
    """Return up to ``limit`` formatted caller frames, oldest first.

    ``limit=None`` captures the whole stack.
    """
    frame = sys._getframe(1)
    while frame is not None and frame.f_globals.get("__name__") in _INTERNAL_MODULES:
        frame = frame.f_back
    if frame is None:
        return []
    return [_format_frame(f) for f in traceback.extract_stack(frame, limit=limit)]


def sync_stack(error: BaseException) -> None:
    """Re-render stack line 0 from the error's current str()."""
    lines = vars(error).get("stack_lines")
    if lines is None:
        return
    lines[0] = str(error)
    error.stack = "\n".join(lines)


def root_initializer(error: BaseException, properties: Mapping[str, Any], config: Any) -> None:
    """Default initializer for root kinds.

    Copies ``properties`` onto the error, with ``code`` and ``message`` kept
    behind the observable properties, and captures the stack.
    """
    limit = CaptureOptions.from_config(config).resolve_limit()

    code = None
    message = ""
    for key, value in properties.items():
        if key == "code":
            code = value or None
        elif key == "message":
            message = value or ""
        else:
            setattr(error, key, value)

    frames = capture_stack(limit)
    vars(error).update(_code=code, _message=message)
    error.stack_lines = ["", *frames]
    sync_stack(error)
