import time

from casebook.shared_kernel.context import RequestContext


def test_background_context_never_expires():
    ctx = RequestContext.background()
    assert ctx.deadline is None
    assert ctx.remaining() is None
    assert not ctx.expired


def test_context_with_timeout_tracks_deadline():
    ctx = RequestContext.create(timeout=60)
    assert not ctx.expired
    assert 0 < ctx.remaining() <= 60


def test_context_with_elapsed_deadline_is_expired():
    ctx = RequestContext(deadline=time.monotonic() - 1)
    assert ctx.expired
    assert ctx.remaining() == 0.0


def test_contexts_get_distinct_correlation_ids():
    assert RequestContext.create().correlation_id != RequestContext.create().correlation_id
