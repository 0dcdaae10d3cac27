"""AsyncResult type for composing async Result operations.

AsyncResult wraps an Awaitable[Result[T, E]] and exposes the same
combinators as Ok / Err. Each one returns a new AsyncResult, so a whole
chain can be built up front and only runs when awaited.

Example:
    ```python
    async def fetch_user(id: int) -> Result[User, LookupError]:
        ...

    result = await (
        AsyncResult(fetch_user(1))
        .flat_map(validate_user)
        .map_async(render_profile)
    )
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Generator
from typing import Any

from async_result.catching import catching_async
from async_result.result import Err, Ok, Result

__all__ = ['AsyncResult']


class AsyncResult[T, E]:
    """Async-aware Result wrapper for chaining combinators.

    Every step awaits the previous Result and delegates to the Ok / Err
    method of the same name, so short-circuiting and suspension behave
    exactly as on a plain Result.

    Note:
        AsyncResult is single-shot when wrapping a coroutine object.
        Coroutines can only be awaited once; awaiting the same AsyncResult
        twice raises RuntimeError. Wrap a Task/Future for multi-await use.

    Example:
        ```python
        async def get_data() -> Result[int, str]:
            return Ok(42)

        async def main():
            result = await AsyncResult(get_data()).map(lambda x: x * 2)
            assert result == Ok(84)
        ```
    """

    __slots__ = ('_awaitable',)

    def __init__(self, awaitable: Awaitable[Result[T, E]]) -> None:
        """Create an AsyncResult from an awaitable producing a Result."""
        self._awaitable = awaitable

    def __await__(self) -> Generator[Any, Any, Result[T, E]]:
        return self._awaitable.__await__()

    @classmethod
    def from_ok(cls, value: T) -> AsyncResult[T, E]:
        """Create an AsyncResult that resolves to Ok(value)."""
        return cls.from_result(Ok(value))

    @classmethod
    def from_err(cls, error: E) -> AsyncResult[T, E]:
        """Create an AsyncResult that resolves to Err(error)."""
        return cls.from_result(Err(error))

    @classmethod
    def from_result(cls, result: Result[T, E]) -> AsyncResult[T, E]:
        """Create an AsyncResult from an already computed Result."""

        async def _result() -> Result[T, E]:
            return result

        return cls(_result())

    @classmethod
    def catching(
        cls,
        body: Callable[[], Awaitable[T]],
        *,
        exceptions: tuple[type[BaseException], ...] | None = None,
    ) -> AsyncResult[T, Any]:
        """Create an AsyncResult that runs body() when awaited.

        An exception of one of the given types becomes Err; see
        ``catching_async``.
        """
        return cls(catching_async(body, exceptions=exceptions))

    def map[U](self, f: Callable[[T], U]) -> AsyncResult[U, E]:
        """Apply a sync function to the Ok value."""

        async def _step() -> Result[U, E]:
            return (await self._awaitable).map(f)

        return AsyncResult(_step())

    def map_async[U](self, f: Callable[[T], Awaitable[U]]) -> AsyncResult[U, E]:
        """Apply an async function to the Ok value.

        Example:
            ```python
            async def double(x: int) -> int:
                return x * 2

            await AsyncResult.from_ok(5).map_async(double)  # Ok(value=10)
            ```
        """

        async def _step() -> Result[U, E]:
            return await (await self._awaitable).map_async(f)

        return AsyncResult(_step())

    def map_err[F](self, f: Callable[[E], F]) -> AsyncResult[T, F]:
        """Apply a sync function to the Err value."""

        async def _step() -> Result[T, F]:
            return (await self._awaitable).map_err(f)

        return AsyncResult(_step())

    def map_err_async[F](self, f: Callable[[E], Awaitable[F]]) -> AsyncResult[T, F]:
        """Apply an async function to the Err value."""

        async def _step() -> Result[T, F]:
            return await (await self._awaitable).map_err_async(f)

        return AsyncResult(_step())

    def flat_map[U](self, f: Callable[[T], Result[U, E]]) -> AsyncResult[U, E]:
        """Chain a sync function returning a Result."""

        async def _step() -> Result[U, E]:
            return (await self._awaitable).flat_map(f)

        return AsyncResult(_step())

    def flat_map_async[U](self, f: Callable[[T], Awaitable[Result[U, E]]]) -> AsyncResult[U, E]:
        """Chain an async function returning a Result."""

        async def _step() -> Result[U, E]:
            return await (await self._awaitable).flat_map_async(f)

        return AsyncResult(_step())

    def flat_map_err[F](self, f: Callable[[E], Result[T, F]]) -> AsyncResult[T, F]:
        """Recover from (or re-type) an Err with a sync function."""

        async def _step() -> Result[T, F]:
            return (await self._awaitable).flat_map_err(f)

        return AsyncResult(_step())

    def flat_map_err_async[F](self, f: Callable[[E], Awaitable[Result[T, F]]]) -> AsyncResult[T, F]:
        """Recover from (or re-type) an Err with an async function."""

        async def _step() -> Result[T, F]:
            return await (await self._awaitable).flat_map_err_async(f)

        return AsyncResult(_step())

    def __repr__(self) -> str:
        return f'AsyncResult({self._awaitable!r})'
