"""
Tests unitaires pour le rate limiter.
"""

import asyncio
import time
import pytest
from unittest.mock import patch

from marvel_client.client.rate_limiter import RateLimiter, RateLimitConfig


class TestRateLimitConfig:
    """Tests pour RateLimitConfig."""

    def test_validation(self):
        with pytest.raises(ValueError):
            RateLimitConfig(max_requests=0, per_milliseconds=1000)

        with pytest.raises(ValueError):
            RateLimitConfig(max_requests=5, per_milliseconds=-1)

    def test_from_max_rps(self):
        config = RateLimitConfig.from_max_rps(4)

        assert config.max_requests == 4
        assert config.per_milliseconds == 1000
        assert config.max_rps == 4.0

    def test_window_seconds(self):
        assert RateLimitConfig(max_requests=2, per_milliseconds=250).window_seconds == 0.25


class TestRateLimiter:
    """Tests pour RateLimiter."""

    @pytest.mark.asyncio
    async def test_passthrough_without_config(self):
        """Sans configuration, aucune attente."""
        limiter = RateLimiter()

        with patch("marvel_client.client.rate_limiter.asyncio.sleep") as mock_sleep:
            for _ in range(50):
                await limiter.acquire()

        mock_sleep.assert_not_called()
        assert limiter.get_stats()["total_requests"] == 50
        assert limiter.get_max_rps() is None

    @pytest.mark.asyncio
    async def test_excess_requests_are_delayed(self, fake_clock):
        """Au-delà de max_requests dans la fenêtre, l'appel attend la sortie du plus ancien."""
        limiter = RateLimiter(
            RateLimitConfig(max_requests=2, per_milliseconds=1000),
            clock=fake_clock
        )
        sleeps = []

        async def fake_sleep(delay):
            sleeps.append(delay)
            fake_clock.advance(delay)

        with patch("marvel_client.client.rate_limiter.asyncio.sleep", new=fake_sleep):
            await limiter.acquire()
            fake_clock.advance(0.2)
            await limiter.acquire()
            await limiter.acquire()

        assert sleeps == [pytest.approx(0.8)]
        assert fake_clock.now == pytest.approx(1.0)
        assert limiter.total_requests == 3

    @pytest.mark.asyncio
    async def test_requests_are_never_dropped(self, fake_clock):
        limiter = RateLimiter(
            RateLimitConfig(max_requests=3, per_milliseconds=500),
            clock=fake_clock
        )

        async def fake_sleep(delay):
            fake_clock.advance(delay)

        with patch("marvel_client.client.rate_limiter.asyncio.sleep", new=fake_sleep):
            for _ in range(10):
                await limiter.acquire()

        assert limiter.total_requests == 10
        # 10 requêtes à 3 par 0.5s : la dernière part à t=1.5s
        assert fake_clock.now == pytest.approx(1.5)

    def test_can_proceed(self, fake_clock):
        limiter = RateLimiter(
            RateLimitConfig(max_requests=1, per_milliseconds=100),
            clock=fake_clock
        )
        assert limiter.can_proceed()

        limiter.request_times.append(fake_clock())
        assert not limiter.can_proceed()

        fake_clock.advance(0.1)
        assert limiter.can_proceed()

    @pytest.mark.asyncio
    async def test_fifo_order_and_delay(self):
        """Les appels en attente sont libérés dans leur ordre d'arrivée."""
        limiter = RateLimiter(RateLimitConfig(max_requests=1, per_milliseconds=50))
        order = []

        async def call(index):
            await limiter.acquire()
            order.append(index)

        start = time.monotonic()
        await asyncio.gather(*(call(i) for i in range(4)))
        elapsed = time.monotonic() - start

        assert order == [0, 1, 2, 3]
        assert elapsed >= 0.14

    @pytest.mark.asyncio
    async def test_limiters_are_independent(self, fake_clock):
        """Deux instances ne partagent pas leur état."""
        config = RateLimitConfig(max_requests=1, per_milliseconds=1000)
        first = RateLimiter(config, clock=fake_clock)
        second = RateLimiter(config, clock=fake_clock)

        await first.acquire()

        assert not first.can_proceed()
        assert second.can_proceed()

    def test_set_config(self, fake_clock):
        limiter = RateLimiter(clock=fake_clock)
        limiter.set_config(RateLimitConfig(max_requests=10, per_milliseconds=2000))

        assert limiter.get_max_rps() == 5.0
        assert limiter.get_stats()["max_requests"] == 10

        limiter.set_config(None)
        assert limiter.get_max_rps() is None

    @pytest.mark.asyncio
    async def test_stats_and_reset(self, fake_clock):
        limiter = RateLimiter(
            RateLimitConfig(max_requests=5, per_milliseconds=1000),
            clock=fake_clock
        )
        await limiter.acquire()
        await limiter.acquire()

        stats = limiter.get_stats()
        assert stats["requests_in_window"] == 2
        assert stats["total_requests"] == 2

        fake_clock.advance(1.0)
        assert limiter.get_stats()["requests_in_window"] == 0

        limiter.reset()
        assert limiter.get_stats()["total_requests"] == 0
