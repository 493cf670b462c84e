"""
Unit tests for cancellation Context
"""

import asyncio
import time

import pytest

from .context import Context
from .exceptions import ContextCanceled, ContextDeadlineExceeded


def test_background_is_never_done():
    """Test background context has no deadline and no error, dood!"""
    ctx = Context.background()

    assert ctx.err() is None
    assert ctx.deadline() is None


def test_cancel_sets_error():
    """Test cancel function marks context as canceled, dood!"""
    ctx, cancel = Context.withCancel(Context.background())
    assert ctx.err() is None

    cancel()
    cancel()

    assert isinstance(ctx.err(), ContextCanceled)


def test_cancel_propagates_to_children_only():
    """Test parent cancellation reaches children but not the other way, dood!"""
    parent, cancelParent = Context.withCancel(Context.background())
    child, cancelChild = Context.withCancel(parent)
    grandChild, _ = Context.withCancel(child)

    cancelChild()
    assert parent.err() is None
    assert isinstance(grandChild.err(), ContextCanceled)

    sibling, _ = Context.withCancel(parent)
    cancelParent()
    assert isinstance(sibling.err(), ContextCanceled)


def test_child_of_done_parent_is_done():
    """Test deriving from done context gives done context, dood!"""
    parent, cancel = Context.withCancel(Context.background())
    cancel()

    child, _ = Context.withCancel(parent)

    assert isinstance(child.err(), ContextCanceled)


def test_deadline_is_inherited():
    """Test child deadline never exceeds parent's, dood!"""
    parent, _ = Context.withTimeout(Context.background(), 1)
    child, _ = Context.withTimeout(parent, 100)

    assert child.deadline() == parent.deadline()


def test_deadline_exceeded():
    """Test expired deadline reports DeadlineExceeded, dood!"""
    ctx, _ = Context.withDeadline(Context.background(), time.monotonic() - 1)

    assert isinstance(ctx.err(), ContextDeadlineExceeded)


@pytest.mark.asyncio
async def test_done_waits_for_timeout():
    """Test done() returns once deadline passes, dood!"""
    ctx, _ = Context.withTimeout(Context.background(), 0.05)

    err = await asyncio.wait_for(ctx.done(), timeout=5)

    assert isinstance(err, ContextDeadlineExceeded)


@pytest.mark.asyncio
async def test_run_returns_result():
    """Test run() passes result through, dood!"""

    async def answer() -> int:
        return 42

    assert await Context.background().run(answer()) == 42


@pytest.mark.asyncio
async def test_run_propagates_exception():
    """Test run() doesn't hide awaitable errors, dood!"""

    async def fail() -> None:
        raise ValueError("boom")

    with pytest.raises(ValueError, match="boom"):
        await Context.background().run(fail())


@pytest.mark.asyncio
async def test_run_cancels_awaitable_when_context_is_done():
    """Test run() cancels pending work on cancel, dood!"""
    cancelled = asyncio.Event()

    async def slow() -> None:
        try:
            await asyncio.sleep(10)
        except asyncio.CancelledError:
            cancelled.set()
            raise

    ctx, cancel = Context.withCancel(Context.background())
    asyncio.get_running_loop().call_later(0.01, cancel)

    with pytest.raises(ContextCanceled):
        await asyncio.wait_for(ctx.run(slow()), timeout=5)
    assert cancelled.is_set()


@pytest.mark.asyncio
async def test_run_with_done_context_does_not_start():
    """Test run() on done context never starts the coroutine, dood!"""
    started = False

    async def work() -> None:
        nonlocal started
        started = True

    ctx, cancel = Context.withCancel(Context.background())
    cancel()

    with pytest.raises(ContextCanceled):
        await ctx.run(work())
    assert not started
