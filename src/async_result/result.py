"""Result type: Ok[T] | Err[E] with sync and async combinators.

Every combinator exists twice: a synchronous method (``map``, ``map_err``,
``flat_map``, ``flat_map_err``) and an asynchronous one with an ``_async``
suffix that awaits the transform. The async variants only suspend on the
branch where the transform is actually invoked.

Example:
    ```python
    from async_result import Err, Ok

    async def parse(text: str) -> int | None:
        return int(text) if text.isdigit() else None

    await Ok('12').map_async(parse)  # Ok(value=12)
    await Err('boom').map_async(parse)  # Err(error='boom'), parse never called
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import NoReturn, TypeIs

import msgspec

from async_result.errors import UnwrapError

__all__ = ['Err', 'Ok', 'Result']


class Ok[T](msgspec.Struct, frozen=True, gc=False):
    """Success variant of Result containing a value of type T.

    Examples:
        >>> Ok(21).map(lambda x: x * 2)
        Ok(value=42)
        >>> Ok(21).flat_map(lambda x: Err('odd') if x % 2 else Ok(x))
        Err(error='odd')
    """

    value: T

    def is_ok(self) -> TypeIs[Ok[T]]:
        """Return True since this is Ok."""
        return True

    def is_err(self) -> TypeIs[Err[object]]:
        """Return False since this is Ok."""
        return False

    def unwrap(self) -> T:
        """Return the contained Ok value."""
        return self.value

    def unwrap_err(self) -> NoReturn:
        """Raise since there is no error to return.

        Raises:
            UnwrapError: Always.
        """
        raise UnwrapError(self, f'Called unwrap_err on Ok: {self.value!r}')

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained Ok value, ignoring the default."""
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the contained Ok value, ignoring the message."""
        return self.value

    def flatten[U, E](self: Ok[Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
        """Remove one level of nesting: Ok(Ok(x)) -> Ok(x), Ok(Err(e)) -> Err(e)."""
        return self.value

    # --- sync combinators ---

    def map[U](self, f: Callable[[T], U], /) -> Ok[U]:
        """Apply f to the contained value and wrap the outcome in Ok.

        Args:
            f: Function to apply to the Ok value.

        Returns:
            Ok containing f(value).
        """
        return Ok(f(self.value))

    def map_err[F](self, _f: Callable[[object], F], /) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def flat_map[U, E](self, f: Callable[[T], Ok[U] | Err[E]], /) -> Ok[U] | Err[E]:
        """Apply a Result-returning function to the contained value.

        The Result returned by f is handed back as is, without wrapping it
        in another Ok.

        Args:
            f: Function that takes T and returns Result[U, E].

        Returns:
            The Result returned by f.
        """
        return f(self.value)

    def flat_map_err[F](self, _f: Callable[[object], Ok[T] | Err[F]], /) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    # --- async combinators ---

    async def map_async[U](self, f: Callable[[T], Awaitable[U]], /) -> Ok[U]:
        """Await f on the contained value and wrap the outcome in Ok.

        Args:
            f: Async function to apply to the Ok value.

        Returns:
            Ok containing the awaited result of f(value).
        """
        return Ok(await f(self.value))

    async def map_err_async[F](self, _f: Callable[[object], Awaitable[F]], /) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    async def flat_map_async[U, E](
        self, f: Callable[[T], Awaitable[Ok[U] | Err[E]]], /
    ) -> Ok[U] | Err[E]:
        """Await a Result-returning function on the contained value.

        Args:
            f: Async function that takes T and returns Result[U, E].

        Returns:
            The awaited Result of f(value).
        """
        return await f(self.value)

    async def flat_map_err_async[F](
        self, _f: Callable[[object], Awaitable[Ok[T] | Err[F]]], /
    ) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self


class Err[E](msgspec.Struct, frozen=True, gc=False):
    """Error variant of Result containing an error of type E.

    The error payload is opaque: combinators route it but never look
    inside it.

    Examples:
        >>> Err('missing').map_err(str.upper)
        Err(error='MISSING')
        >>> Err('missing').flat_map_err(lambda e: Ok(0))
        Ok(value=0)
    """

    error: E

    def is_ok(self) -> TypeIs[Ok[object]]:
        """Return False since this is Err."""
        return False

    def is_err(self) -> TypeIs[Err[E]]:
        """Return True since this is Err."""
        return True

    def unwrap(self) -> NoReturn:
        """Raise since there is no value to return.

        When the error is an exception it is chained as ``__cause__``.

        Raises:
            UnwrapError: Always.
        """
        cause = self.error if isinstance(self.error, BaseException) else None
        raise UnwrapError(self, f'Called unwrap on Err: {self.error!r}') from cause

    def unwrap_err(self) -> E:
        """Return the contained error."""
        return self.error

    def unwrap_or[T](self, default: T) -> T:
        """Return the default since this is Err."""
        return default

    def expect(self, msg: str) -> NoReturn:
        """Raise with a custom message.

        Raises:
            UnwrapError: Always, with msg prefixed.
        """
        cause = self.error if isinstance(self.error, BaseException) else None
        raise UnwrapError(self, f'{msg}: {self.error!r}') from cause

    def flatten(self) -> Err[E]:
        """Return self since there is nothing to flatten."""
        return self

    # --- sync combinators ---

    def map[T, U](self, _f: Callable[[T], U], /) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def map_err[F](self, f: Callable[[E], F], /) -> Err[F]:
        """Apply f to the contained error and wrap the outcome in Err.

        Args:
            f: Function to apply to the error.

        Returns:
            Err containing f(error).
        """
        return Err(f(self.error))

    def flat_map[T, U](self, _f: Callable[[T], Ok[U] | Err[E]], /) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def flat_map_err[T, F](self, f: Callable[[E], Ok[T] | Err[F]], /) -> Ok[T] | Err[F]:
        """Apply a Result-returning function to the contained error.

        This is how an Err is recovered into an Ok, or turned into an Err
        of a different error type.

        Args:
            f: Function that takes E and returns Result[T, F].

        Returns:
            The Result returned by f.
        """
        return f(self.error)

    # --- async combinators ---

    async def map_async[T, U](self, _f: Callable[[T], Awaitable[U]], /) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    async def map_err_async[F](self, f: Callable[[E], Awaitable[F]], /) -> Err[F]:
        """Await f on the contained error and wrap the outcome in Err.

        Args:
            f: Async function to apply to the error.

        Returns:
            Err containing the awaited result of f(error).
        """
        return Err(await f(self.error))

    async def flat_map_async[T, U](
        self, _f: Callable[[T], Awaitable[Ok[U] | Err[E]]], /
    ) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    async def flat_map_err_async[T, F](
        self, f: Callable[[E], Awaitable[Ok[T] | Err[F]]], /
    ) -> Ok[T] | Err[F]:
        """Await a Result-returning function on the contained error.

        Args:
            f: Async function that takes E and returns Result[T, F].

        Returns:
            The awaited Result of f(error).
        """
        return await f(self.error)


type Result[T, E = Exception] = Ok[T] | Err[E]
