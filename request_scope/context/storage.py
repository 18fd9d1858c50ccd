"""
request_scope.context.storage

Purpose:
    Scoped storage that binds the current RequestContext to an asynchronous
    execution chain using contextvars.

Notes:
    - asyncio copies the current contextvars.Context whenever a task or loop
      callback is scheduled, so a binding follows the chain of causality
      (create_task, call_soon, call_later, awaited coroutines), not the call stack.
    - Two tasks interleaving on the same event loop never see each other's binding.
    - current() never fabricates a default; it returns None outside any run().
"""

from __future__ import annotations

import contextvars
import inspect
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, Callable, Coroutine, Iterator, TypeVar

if TYPE_CHECKING:
    from request_scope.context.request_context import RequestContext

T = TypeVar("T")

_current_ctx_var: contextvars.ContextVar[RequestContext | None] = contextvars.ContextVar(
    "request_scope_context",
    default=None,
)


def current() -> RequestContext | None:
    """Return the RequestContext bound to the calling chain, or None."""
    return _current_ctx_var.get()


def _call_bound(context: RequestContext, fn: Callable[..., Any], args: tuple, kwargs: dict) -> Any:
    # Runs inside a copied Context; the set() is discarded when that copy is left.
    _current_ctx_var.set(context)
    return fn(*args, **kwargs)


async def _await_bound(context: RequestContext, coro: Coroutine[Any, Any, T]) -> T:
    token = _current_ctx_var.set(context)
    try:
        return await coro
    finally:
        _current_ctx_var.reset(token)


def run(context: RequestContext, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
    """
    Call fn(*args, **kwargs) with `context` bound as current.

    Synchronous work runs in a copy of the caller's Context: anything it schedules
    keeps observing `context` after run() returns, while the caller's own binding
    is untouched.

    If fn returns a coroutine, a wrapping coroutine is returned instead; awaiting it
    keeps `context` bound for the whole await and restores the previous binding after:

        response = await run(ctx, call_next, request)
    """
    scope = contextvars.copy_context()
    result = scope.run(_call_bound, context, fn, args, kwargs)
    # Tasks and futures captured the binding when they were scheduled; returned as-is.
    if inspect.iscoroutine(result):
        return _await_bound(context, result)
    return result


@contextmanager
def bound(context: RequestContext) -> Iterator[RequestContext]:
    """Statement form of run(): bind `context` for the body of a with-block."""
    token = _current_ctx_var.set(context)
    try:
        yield context
    finally:
        _current_ctx_var.reset(token)
