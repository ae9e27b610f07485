"""Centralized configuration for streamfmt."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ErrorPolicy(Enum):
    RAISE = "raise"
    ABORT = "abort"


@dataclass
class FormatSettings:
    """Settings for a formatting call.

    error_policy decides what the error hook does with a failure.
    strict_arguments makes arguments left over after the last directive an
    error instead of silently ignoring them.
    """

    error_policy: ErrorPolicy = field(default=ErrorPolicy.RAISE)
    strict_arguments: bool = False


DEFAULT_SETTINGS = FormatSettings()
