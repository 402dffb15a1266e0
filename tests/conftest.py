# tests/conftest.py
import pytest

from siquant.core.precondition import failure_handler, reset_failure_handler


class FailureRecorder:
    """Non-raising failure handler that keeps every reported message."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def __call__(self, message: str) -> None:
        self.messages.append(message)


@pytest.fixture
def failures():
    recorder = FailureRecorder()
    with failure_handler(recorder):
        yield recorder


@pytest.fixture(autouse=True)
def _restore_failure_handler():
    # a test that swaps the handler by hand must not leak it into the next one
    yield
    reset_failure_handler()
