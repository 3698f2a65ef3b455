"""Fan-out helper that joins every branch and keeps failures per branch."""

import asyncio
from collections.abc import Awaitable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Settled(Generic[T]):
    """Outcome of one branch: either a value or the exception it raised."""

    value: T | None = None
    error: BaseException | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap_or(self, default: T) -> T:
        """Return the value, or *default* if the branch failed."""
        if self.error is not None:
            return default
        return self.value  # type: ignore[return-value]


async def gather_settled(*aws: Awaitable[Any]) -> list[Settled[Any]]:
    """Run awaitables concurrently and wait for all of them.

    A failing branch does not cancel its siblings. Results keep the order
    of the arguments.
    """
    results = await asyncio.gather(*aws, return_exceptions=True)
    settled: list[Settled[Any]] = []
    for result in results:
        if isinstance(result, BaseException):
            settled.append(Settled(error=result))
        else:
            settled.append(Settled(value=result))
    return settled
