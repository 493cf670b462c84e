"""
Cancellation context for Smapp SDK calls.

A Context carries cancellation and an optional deadline down to a request.
Contexts form a tree: cancelling a parent cancels all of its children, and a
child never outlives its parent's deadline.

Example:
    >>> ctx, cancel = Context.withTimeout(Context.background(), 2.5)
    >>> try:
    ...     name = await client.getDisplayNameWithContext(ctx, 35.7, 51.4, options)
    ... finally:
    ...     cancel()
"""

import asyncio
import logging
import time
from typing import Awaitable, Callable, Optional, Set, Tuple, TypeVar

from .exceptions import ContextCanceled, ContextDeadlineExceeded, ContextError

logger = logging.getLogger(__name__)

CancelFunc = Callable[[], None]
T = TypeVar("T")


class Context:
    """Cancellation signal with optional deadline, dood!

    Use the factory classmethods instead of calling the constructor directly.
    Deadlines are expressed in `time.monotonic()` seconds.
    """

    __slots__ = ("_parent", "_deadline", "_err", "_doneEvent", "_children")

    def __init__(self, parent: Optional["Context"] = None, deadline: Optional[float] = None) -> None:
        self._parent = parent
        self._deadline = deadline
        if parent is not None and parent._deadline is not None:
            self._deadline = parent._deadline if deadline is None else min(deadline, parent._deadline)

        self._err: Optional[ContextError] = None
        self._doneEvent = asyncio.Event()
        self._children: Set["Context"] = set()

        if parent is not None:
            parentErr = parent.err()
            if parentErr is not None:
                self._cancel(parentErr)
            else:
                parent._children.add(self)

    @classmethod
    def background(cls) -> "Context":
        """Get non-cancelable context without deadline."""
        return cls()

    @classmethod
    def withCancel(cls, parent: "Context") -> Tuple["Context", CancelFunc]:
        """Derive cancelable context from parent.

        Returns:
            Tuple of new context and function cancelling it. Calling the function
            more than once is harmless.
        """
        ctx = cls(parent)
        return ctx, lambda: ctx._cancel(ContextCanceled())

    @classmethod
    def withDeadline(cls, parent: "Context", deadline: float) -> Tuple["Context", CancelFunc]:
        """Derive context which is done at given monotonic time (or earlier if parent is done)."""
        ctx = cls(parent, deadline)
        return ctx, lambda: ctx._cancel(ContextCanceled())

    @classmethod
    def withTimeout(cls, parent: "Context", timeout: float) -> Tuple["Context", CancelFunc]:
        """Derive context which is done after `timeout` seconds."""
        return cls.withDeadline(parent, time.monotonic() + timeout)

    def deadline(self) -> Optional[float]:
        """Get monotonic deadline or None if there is no deadline."""
        return self._deadline

    def err(self) -> Optional[ContextError]:
        """Get reason context is done, or None if it is still alive."""
        if self._err is None and self._deadline is not None and time.monotonic() >= self._deadline:
            self._cancel(ContextDeadlineExceeded())
        return self._err

    async def done(self) -> ContextError:
        """Wait until context is done and return the reason.

        Never returns for a background context.
        """
        while self.err() is None:
            if self._deadline is None:
                await self._doneEvent.wait()
                continue

            remaining = max(self._deadline - time.monotonic(), 0)
            try:
                await asyncio.wait_for(self._doneEvent.wait(), timeout=remaining)
            except asyncio.TimeoutError:
                pass

        # err() is set at this point
        return self._err  # type: ignore[return-value]

    async def run(self, awaitable: Awaitable[T]) -> T:
        """Await `awaitable` unless context is done first.

        If context is done before awaitable completes, awaitable is cancelled
        and the context error is raised. Result of an awaitable that completed
        first is returned even if context is done by now.

        Raises:
            ContextError: If context is done before awaitable completes
        """
        err = self.err()
        if err is not None:
            if asyncio.iscoroutine(awaitable):
                awaitable.close()
            raise err

        task = asyncio.ensure_future(awaitable)
        doneTask = asyncio.ensure_future(self.done())
        try:
            await asyncio.wait({task, doneTask}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            doneTask.cancel()
            if not task.done():
                task.cancel()
                # Let cancelled task release its resources
                await asyncio.wait({task})

        if task.cancelled():
            raise self.err() or ContextCanceled()
        return task.result()

    def _cancel(self, err: ContextError) -> None:
        if self._err is not None:
            return

        self._err = err
        self._doneEvent.set()
        logger.debug(f"Context done: {err}")

        children = list(self._children)
        self._children.clear()
        for child in children:
            child._cancel(err)

        if self._parent is not None:
            self._parent._children.discard(self)
