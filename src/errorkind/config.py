"""Capture settings — process-wide stack depth and per-instance options.

The process-wide default depth is read once from ERRORKIND_STACK_LENGTH
(falls back to 10, the usual traceback depth) and can be changed at runtime
with configure() or temporarily with override_settings().
"""

from __future__ import annotations

import logging
import math
import os
import sys
from collections.abc import Mapping
from contextlib import contextmanager
from decimal import Decimal
from numbers import Real
from typing import Any, Iterator, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)

_DEFAULT_STACK_LENGTH = 10
_ENV_STACK_LENGTH = "ERRORKIND_STACK_LENGTH"


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    stack_length: int = Field(default=_DEFAULT_STACK_LENGTH, ge=0)


class CaptureOptions(BaseModel):
    """Per-instance capture options.

    Invalid stack lengths are dropped rather than rejected, so a bad value
    simply means "use the process-wide default".
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    stack_length: Optional[float] = Field(default=None, alias="stackLength")

    @field_validator("stack_length", mode="before")
    @classmethod
    def drop_invalid_length(cls, v: Any) -> Optional[float]:
        if isinstance(v, bool) or not isinstance(v, (Real, Decimal)):
            return None
        try:
            v = float(v)
        except OverflowError:
            v = math.inf if v > 0 else -math.inf
        except ValueError:
            return None
        if math.isnan(v) or v < 0:
            return None
        return v

    @classmethod
    def from_config(cls, config: Any) -> CaptureOptions:
        if not isinstance(config, Mapping):
            return cls()
        return cls.model_validate(dict(config))

    def resolve_limit(self, settings: Optional[Settings] = None) -> Optional[int]:
        """Return the frame limit to capture, None meaning unlimited."""
        if self.stack_length is None:
            limit = (settings or get_settings()).stack_length
        elif math.isinf(self.stack_length):
            return None
        else:
            limit = int(self.stack_length)
        # traceback cannot slice past sys.maxsize frames
        return None if limit >= sys.maxsize else limit


def _settings_from_env() -> Settings:
    raw = os.environ.get(_ENV_STACK_LENGTH)
    if raw is None:
        return Settings()
    try:
        return Settings(stack_length=int(raw))
    except ValueError:
        logger.warning(
            "Ignoring invalid %s=%r, using %d",
            _ENV_STACK_LENGTH, raw, _DEFAULT_STACK_LENGTH,
        )
        return Settings()


_settings: Settings = _settings_from_env()


def get_settings() -> Settings:
    return _settings


def configure(**changes: Any) -> Settings:
    """Replace the process-wide settings. Raises pydantic ValidationError."""
    global _settings
    _settings = Settings.model_validate({**_settings.model_dump(), **changes})
    return _settings


@contextmanager
def override_settings(**changes: Any) -> Iterator[Settings]:
    """Temporarily apply settings, restoring the previous ones on exit."""
    global _settings
    previous = _settings
    try:
        yield configure(**changes)
    finally:
        _settings = previous
