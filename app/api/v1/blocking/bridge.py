"""
Thread-per-request bridge.

Endpoints in this package are plain ``def`` functions, which FastAPI runs on
its worker thread pool. Each one hands the async service call back to the event
loop that owns the database client and blocks its worker thread until the
result is ready.
"""
import functools
from typing import Any, Awaitable, Callable, TypeVar

from anyio import from_thread

T = TypeVar("T")


def run_blocking(func: Callable[..., Awaitable[T]], *args: Any, **kwargs: Any) -> T:
    """Run ``func(*args, **kwargs)`` on the event loop and wait for its result."""
    return from_thread.run(functools.partial(func, *args, **kwargs))
