"""
Test suite for RateLimiter.

Uses a fake clock and recorded sleeps so no test waits in real time.

System role: Verification of provider throttling
"""

import pytest

from knowledge_rag.core.document_processing import RateLimiter


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self) -> None:
        self.now = 100.0
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


class TestRateLimiter:
    """Test suite for RateLimiter.acquire()."""

    def test_init_should_reject_negative_interval(self) -> None:
        with pytest.raises(ValueError):
            RateLimiter(min_interval_seconds=-0.1)

    def test_default_interval_should_be_350ms(self) -> None:
        assert RateLimiter().min_interval_seconds == 0.35

    async def test_first_acquire_should_not_wait(self, clock: FakeClock) -> None:
        limiter = RateLimiter(0.35, clock=clock, sleep=clock.sleep)

        await limiter.acquire()

        assert clock.sleeps == []

    async def test_back_to_back_acquires_should_wait_full_interval(self, clock: FakeClock) -> None:
        """Test consecutive calls are spaced by the minimum interval."""
        # Arrange
        limiter = RateLimiter(0.35, clock=clock, sleep=clock.sleep)

        # Act
        for _ in range(3):
            await limiter.acquire()

        # Assert
        assert clock.sleeps == pytest.approx([0.35, 0.35])

    async def test_acquire_should_wait_only_remaining_time(self, clock: FakeClock) -> None:
        """Test time spent elsewhere counts toward the interval."""
        # Arrange
        limiter = RateLimiter(0.35, clock=clock, sleep=clock.sleep)
        await limiter.acquire()

        # Act
        clock.now += 0.25
        await limiter.acquire()

        # Assert
        assert clock.sleeps == pytest.approx([0.10])

    async def test_acquire_should_not_wait_after_interval_elapsed(self, clock: FakeClock) -> None:
        limiter = RateLimiter(0.35, clock=clock, sleep=clock.sleep)
        await limiter.acquire()

        clock.now += 1.0
        await limiter.acquire()

        assert clock.sleeps == []

    async def test_zero_interval_should_never_wait(self, clock: FakeClock) -> None:
        limiter = RateLimiter(0.0, clock=clock, sleep=clock.sleep)

        await limiter.acquire()
        await limiter.acquire()

        assert clock.sleeps == []
