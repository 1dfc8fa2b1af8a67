import pytest

from creation_hub.services.request_state import (
    RequestState,
    RequestTracker,
    SubmissionInProgressError,
)


@pytest.fixture
def tracker():
    return RequestTracker()


def test_unknown_key_is_idle(tracker):
    assert tracker.state("post", "s1") == RequestState.IDLE


def test_pending_key_refuses_second_start(tracker):
    tracker.start("post", "s1")
    with pytest.raises(SubmissionInProgressError) as exc_info:
        tracker.start("post", "s1")
    assert exc_info.value.status_code == 409


def test_keys_are_independent(tracker):
    tracker.start("post", "s1")
    tracker.start("post", "s2")
    tracker.start("export", "s1")
    assert tracker.is_pending("post", "s2")
    assert tracker.is_pending("export", "s1")


def test_settled_key_can_start_again(tracker):
    tracker.start("post", "s1")
    tracker.settle("post", "s1", success=False)
    assert tracker.state("post", "s1") == RequestState.FAILED
    tracker.start("post", "s1")
    assert tracker.is_pending("post", "s1")


@pytest.mark.asyncio
async def test_track_settles_success(tracker):
    async with tracker.track("export", "s1"):
        assert tracker.is_pending("export", "s1")
    assert tracker.state("export", "s1") == RequestState.SUCCEEDED


@pytest.mark.asyncio
async def test_track_settles_failure_on_exception(tracker):
    with pytest.raises(ValueError):
        async with tracker.track("export", "s1"):
            raise ValueError("nope")
    assert tracker.state("export", "s1") == RequestState.FAILED


@pytest.mark.asyncio
async def test_track_keeps_explicit_settlement(tracker):
    async with tracker.track("post", "s1"):
        tracker.settle("post", "s1", success=False)
    assert tracker.state("post", "s1") == RequestState.FAILED


@pytest.mark.asyncio
async def test_settled_keys_are_released_beyond_history_size():
    tracker = RequestTracker(max_settled=10)

    for i in range(1000):
        async with tracker.track("post", f"session-{i}"):
            pass

    assert len(tracker) == 10
    assert tracker.state("post", "session-999") == RequestState.SUCCEEDED
    assert tracker.state("post", "session-0") == RequestState.IDLE


def test_pending_keys_are_never_evicted():
    tracker = RequestTracker(max_settled=1)
    tracker.start("post", "busy")

    for i in range(5):
        tracker.start("export", f"s{i}")
        tracker.settle("export", f"s{i}", success=True)

    assert tracker.is_pending("post", "busy")
    assert len(tracker) == 2


def test_restart_clears_previous_outcome(tracker):
    tracker.start("post", "s1")
    tracker.settle("post", "s1", success=True)
    tracker.start("post", "s1")

    assert len(tracker) == 1
    assert tracker.state("post", "s1") == RequestState.PENDING


def test_reset_forgets_everything(tracker):
    tracker.start("post", "s1")
    tracker.start("export", "s1")
    tracker.settle("export", "s1", success=False)

    tracker.reset()

    assert len(tracker) == 0
    assert tracker.state("post", "s1") == RequestState.IDLE
