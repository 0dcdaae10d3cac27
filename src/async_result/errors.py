"""Exceptions raised by async_result itself."""

from __future__ import annotations

from typing import Any

__all__ = ['UnwrapError']


class UnwrapError(RuntimeError):
    """A value was extracted from the wrong Result variant.

    Raised by ``Err.unwrap()``, ``Err.expect()`` and ``Ok.unwrap_err()``.
    When the Err payload is itself an exception it is chained as
    ``__cause__``.

    Attributes:
        result: The Ok or Err that could not be unwrapped.
    """

    def __init__(self, result: Any, message: str) -> None:
        self.result = result
        super().__init__(message)
