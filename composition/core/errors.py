#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: composition/core/errors.py

from typing import Any, Optional


class ColorError(ValueError):
    """
    Base class for conversion errors.

    Carries the offending value and an optional hint that the CLI
    prints after the error line.
    """

    def __init__(self, message: str, value: Any = None, hint: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.value = value
        self.hint = hint

    def __str__(self) -> str:
        return self.message


class InvalidFormat(ColorError):
    """Structurally malformed input: bad hex, unparsable text, unknown model."""


class OutOfRange(ColorError):
    """Numeric input outside the domain of a decoding conversion."""
