"""Catching initializers and the @safe / @safe_async decorators.

This is the only layer that turns a raised exception into data. The
combinators on Ok and Err let exceptions from user transforms propagate.

Exceptions outside the catch tuple always propagate. With the default
``(Exception,)`` that includes ``asyncio.CancelledError``,
``KeyboardInterrupt`` and ``SystemExit``, so cancellation is never
swallowed.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, overload

import wrapt

from async_result._config import get_config
from async_result._logging import get_logger
from async_result.result import Err, Ok

__all__ = ['catching', 'catching_async', 'safe', 'safe_async']

logger = get_logger(__name__)


def _resolve(exceptions: tuple[type[BaseException], ...] | None) -> tuple[type[BaseException], ...]:
    return exceptions if exceptions is not None else get_config().catch


def _caught(body: Callable[..., Any], exc: BaseException) -> Err[Any]:
    logger.debug(
        'exception converted to Err',
        operation=getattr(body, '__qualname__', repr(body)),
        exc_type=type(exc).__name__,
    )
    return Err(exc)


def catching[T](
    body: Callable[[], T],
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Ok[T] | Err[Any]:
    """Run body() and capture its outcome as a Result.

    Args:
        body: Zero-argument callable to run.
        exceptions: Exception types to capture. Defaults to the configured
            catch tuple, which is (Exception,) unless changed via init().

    Returns:
        Ok(return value), or Err holding the very exception object raised.

    Example:
        ```python
        catching(lambda: int('12'))  # Ok(value=12)
        catching(lambda: int('x'))  # Err(error=ValueError(...))
        ```
    """
    catch = _resolve(exceptions)
    try:
        return Ok(body())
    except catch as e:
        return _caught(body, e)


async def catching_async[T](
    body: Callable[[], Awaitable[T]],
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Ok[T] | Err[Any]:
    """Await body() and capture its outcome as a Result.

    Suspends for as long as the awaited operation runs.

    Args:
        body: Zero-argument callable returning an awaitable, typically an
            async function.
        exceptions: Exception types to capture. Defaults to the configured
            catch tuple.

    Returns:
        Ok(awaited value), or Err holding the very exception object raised.
    """
    catch = _resolve(exceptions)
    try:
        return Ok(await body())
    except catch as e:
        return _caught(body, e)


@overload
def safe[**P, T](
    func: Callable[P, T],
) -> Callable[P, Ok[T] | Err[Exception]]: ...


@overload
def safe[**P, T, E: BaseException](
    func: None = None,
    *,
    exceptions: tuple[type[E], ...] | None = None,
) -> Callable[[Callable[P, T]], Callable[P, Ok[T] | Err[E]]]: ...


def safe(
    func: Callable[..., Any] | None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Decorator that catches exceptions and returns Err.

    Can be used with or without arguments:
        @safe
        def risky(): ...

        @safe(exceptions=(ValueError, TypeError))
        def specific(): ...

    Args:
        func: The function to wrap (when used without parentheses).
        exceptions: Exception types to catch. Defaults to the configured
            catch tuple.

    Returns:
        A wrapped function that returns Result[T, E] instead of T.
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[..., Any],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Ok[Any] | Err[Any]:
        catch = _resolve(exceptions)
        try:
            return Ok(wrapped(*args, **kwargs))
        except catch as e:
            return _caught(wrapped, e)

    if func is not None:
        return wrapper(func)
    return wrapper


@overload
def safe_async[**P, T](
    func: Callable[P, Awaitable[T]],
) -> Callable[P, Awaitable[Ok[T] | Err[Exception]]]: ...


@overload
def safe_async[**P, T, E: BaseException](
    func: None = None,
    *,
    exceptions: tuple[type[E], ...] | None = None,
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[Ok[T] | Err[E]]]]: ...


def safe_async(
    func: Callable[..., Awaitable[Any]] | None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Async decorator that catches exceptions and returns Err.

    Can be used with or without arguments:
        @safe_async
        async def risky(): ...

        @safe_async(exceptions=(ValueError, TypeError))
        async def specific(): ...

    Args:
        func: The async function to wrap (when used without parentheses).
        exceptions: Exception types to catch. Defaults to the configured
            catch tuple.

    Returns:
        A wrapped async function that returns Result[T, E] instead of T.
    """

    @wrapt.decorator
    async def wrapper(
        wrapped: Callable[..., Awaitable[Any]],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Ok[Any] | Err[Any]:
        catch = _resolve(exceptions)
        try:
            return Ok(await wrapped(*args, **kwargs))
        except catch as e:
            return _caught(wrapped, e)

    if func is not None:
        return wrapper(func)
    return wrapper
