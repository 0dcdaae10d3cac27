"""Free-standing forms of the Result combinators.

Each function takes the Result as its first argument and behaves exactly
like the method of the same family on Ok / Err. They are handy where a
plain function is wanted, e.g. with ``functools.partial`` or ``map()``.

Example:
    ```python
    from functools import partial

    from async_result.combinators import map_result

    doubled = list(map(partial(map_result, f=lambda x: x * 2), [Ok(1), Err('e')]))
    # [Ok(value=2), Err(error='e')]
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from async_result.result import Err, Ok

__all__ = [
    'flat_map',
    'flat_map_async',
    'flat_map_error',
    'flat_map_error_async',
    'map_error',
    'map_error_async',
    'map_result',
    'map_result_async',
]


def map_result[T, U, E](result: Ok[T] | Err[E], f: Callable[[T], U]) -> Ok[U] | Err[E]:
    """Ok(v) -> Ok(f(v)); Err passes through and f is not called."""
    return result.map(f)


async def map_result_async[T, U, E](
    result: Ok[T] | Err[E], f: Callable[[T], Awaitable[U]]
) -> Ok[U] | Err[E]:
    """Ok(v) -> Ok(await f(v)); Err passes through without suspending."""
    return await result.map_async(f)


def map_error[T, E, F](result: Ok[T] | Err[E], f: Callable[[E], F]) -> Ok[T] | Err[F]:
    """Err(e) -> Err(f(e)); Ok passes through and f is not called."""
    return result.map_err(f)


async def map_error_async[T, E, F](
    result: Ok[T] | Err[E], f: Callable[[E], Awaitable[F]]
) -> Ok[T] | Err[F]:
    """Err(e) -> Err(await f(e)); Ok passes through without suspending."""
    return await result.map_err_async(f)


def flat_map[T, U, E](result: Ok[T] | Err[E], f: Callable[[T], Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
    """Ok(v) -> f(v), not re-wrapped; Err short-circuits."""
    return result.flat_map(f)


async def flat_map_async[T, U, E](
    result: Ok[T] | Err[E], f: Callable[[T], Awaitable[Ok[U] | Err[E]]]
) -> Ok[U] | Err[E]:
    """Ok(v) -> await f(v), not re-wrapped; Err short-circuits."""
    return await result.flat_map_async(f)


def flat_map_error[T, E, F](
    result: Ok[T] | Err[E], f: Callable[[E], Ok[T] | Err[F]]
) -> Ok[T] | Err[F]:
    """Err(e) -> f(e), which may recover into Ok; Ok passes through."""
    return result.flat_map_err(f)


async def flat_map_error_async[T, E, F](
    result: Ok[T] | Err[E], f: Callable[[E], Awaitable[Ok[T] | Err[F]]]
) -> Ok[T] | Err[F]:
    """Err(e) -> await f(e), which may recover into Ok; Ok passes through."""
    return await result.flat_map_err_async(f)
