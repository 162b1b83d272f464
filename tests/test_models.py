"""Unit tests for PingWatch data models and the stats accumulator."""

from datetime import datetime

import pytest

from pingwatch.models import HostStats, ProbeResult
from pingwatch.stats import StatsAccumulator


def reply(host, latency):
    return ProbeResult(host=host, timestamp=datetime(2026, 1, 1), latency_ms=latency)


def failure(host):
    return ProbeResult.failure(host, datetime(2026, 1, 1))


class TestProbeResult:
    """Test ProbeResult success semantics."""

    def test_reply_is_success(self):
        assert reply("a", 12.5).success

    def test_zero_latency_is_success(self):
        """A 0ms reply is still a reply."""
        assert reply("a", 0.0).success

    def test_failure_has_no_latency(self):
        result = failure("a")
        assert not result.success
        assert result.latency_ms is None

    def test_failure_default_timestamp(self):
        result = ProbeResult.failure("a")
        assert isinstance(result.timestamp, datetime)


class TestHostStats:
    """Test HostStats counters and derived values."""

    def test_initial_state(self):
        stats = HostStats(host="a")
        assert stats.sent == stats.received == stats.lost == 0
        assert stats.min_latency_ms is None
        assert stats.max_latency_ms == 0.0
        assert stats.loss_percent == 0.0
        assert stats.average_latency == 0.0
        assert stats.reported_min == 0.0
        assert stats.jitter == 0.0

    def test_success_updates_latency_fields(self):
        stats = HostStats(host="a")
        stats.add(reply("a", 20.0))
        stats.add(reply("a", 10.0))
        stats.add(reply("a", 30.0))

        assert stats.sent == 3
        assert stats.received == 3
        assert stats.lost == 0
        assert stats.min_latency_ms == 10.0
        assert stats.max_latency_ms == 30.0
        assert stats.sum_latency_ms == 60.0
        assert stats.average_latency == 20.0

    def test_failure_leaves_latency_fields_untouched(self):
        stats = HostStats(host="a")
        stats.add(reply("a", 15.0))
        stats.add(failure("a"))

        assert stats.lost == 1
        assert stats.min_latency_ms == 15.0
        assert stats.max_latency_ms == 15.0
        assert list(stats.recent_latencies) == [15.0]

    def test_sent_equals_received_plus_lost(self):
        stats = HostStats(host="a")
        pattern = [10.0, None, 12.0, None, None, 8.0, 9.5]
        for latency in pattern:
            stats.add(reply("a", latency) if latency is not None else failure("a"))
            assert stats.sent == stats.received + stats.lost

        assert stats.received == 4
        assert stats.lost == 3

    def test_loss_percent_rounding(self):
        stats = HostStats(host="a")
        stats.add(failure("a"))
        stats.add(reply("a", 1.0))
        stats.add(reply("a", 1.0))
        assert stats.loss_percent == 33.33

    def test_loss_percent_bounds(self):
        stats = HostStats(host="a")
        for _ in range(5):
            stats.add(failure("a"))
        assert stats.loss_percent == 100.0

    def test_reported_min_zero_without_successes(self):
        stats = HostStats(host="a")
        for _ in range(10):
            stats.add(failure("a"))
        assert stats.sent == 10
        assert stats.reported_min == 0.0

    def test_jitter_example(self):
        stats = HostStats(host="a")
        for latency in (10.0, 15.0, 12.0):
            stats.add(reply("a", latency))
        assert stats.jitter == 4.0

    def test_jitter_single_sample(self):
        stats = HostStats(host="a")
        stats.add(reply("a", 42.0))
        assert stats.jitter == 0.0

    def test_jitter_rounded(self):
        stats = HostStats(host="a")
        for latency in (1.0, 2.0, 4.0, 4.5):
            stats.add(reply("a", latency))
        # (1 + 2 + 0.5) / 3
        assert stats.jitter == 1.17

    def test_recent_latencies_bounded(self):
        stats = HostStats(host="a")
        for i in range(150):
            stats.add(reply("a", float(i)))

        assert len(stats.recent_latencies) == 100
        assert list(stats.recent_latencies) == [float(i) for i in range(50, 150)]
        # Extremes still cover all samples
        assert stats.min_latency_ms == 0.0
        assert stats.max_latency_ms == 149.0


class TestStatsAccumulator:
    """Test StatsAccumulator per-host bookkeeping."""

    def test_hosts_in_configured_order(self):
        acc = StatsAccumulator(["c", "a", "b"])
        assert acc.hosts() == ["c", "a", "b"]
        assert len(acc) == 3

    def test_record_routes_by_host(self):
        acc = StatsAccumulator(["a", "b"])
        acc.record(reply("a", 10.0))
        acc.record(failure("b"))

        assert acc.get("a").received == 1
        assert acc.get("b").lost == 1
        assert acc.get("a").lost == 0

    def test_unknown_host_raises(self):
        acc = StatsAccumulator(["a"])
        with pytest.raises(KeyError):
            acc.record(reply("z", 1.0))

    def test_query_helpers(self):
        acc = StatsAccumulator(["a"])
        for latency in (10.0, 15.0, 12.0):
            acc.record(reply("a", latency))
        acc.record(failure("a"))

        assert acc.jitter("a") == 4.0
        assert acc.loss_percent("a") == 25.0
        assert acc.average_latency("a") == 12.33
        assert acc.reported_min("a") == 10.0
        assert acc.reported_max("a") == 15.0

    def test_snapshot(self):
        acc = StatsAccumulator(["a"])
        acc.record(failure("a"))

        assert acc.snapshot("a") == {
            "sent": 1,
            "received": 0,
            "lost": 1,
            "loss_percent": 100.0,
            "min_ms": 0.0,
            "max_ms": 0.0,
            "avg_ms": 0.0,
            "jitter_ms": 0.0,
        }

    def test_instances_are_isolated(self):
        first = StatsAccumulator(["a"])
        second = StatsAccumulator(["a"])
        first.record(reply("a", 5.0))

        assert first.get("a").sent == 1
        assert second.get("a").sent == 0
