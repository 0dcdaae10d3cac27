"""Async utilities: AsyncResult for chaining awaitable Results.

Examples:
    >>> from async_result.async_ import AsyncResult
    >>>
    >>> async def fetch(id: int) -> Result[dict, str]:
    ...     return Ok({"id": id})
    >>>
    >>> async def main():
    ...     return await AsyncResult(fetch(1)).map(lambda d: d["id"])
"""

from async_result.async_.result import AsyncResult

__all__ = ['AsyncResult']
