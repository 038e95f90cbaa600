"""Tests for stability scoring and the simulation recorder."""

from collections.abc import Callable
from datetime import datetime, timedelta

import pytest

from gridrestart.controllers import SimulationRecorder, StabilityTable
from gridrestart.domain.models import GenerationAsset, MinuteResult


def minute_result(
    minute: int,
    generated_mw: float,
    demand_mw: float,
    stability: float,
) -> MinuteResult:
    return MinuteResult(
        time=datetime(2025, 4, 28, 12, 0) + timedelta(minutes=minute),
        minute=minute,
        generated_mw=generated_mw,
        expected_demand_mw=demand_mw,
        average_stability=stability,
    )


class TestStabilityTable:
    """Tests for the generation-weighted stability score."""

    def test_first_asset_sets_class_coefficient(
        self, asset_factory: Callable[..., GenerationAsset]
    ) -> None:
        """Test the first asset of a class wins."""
        table = StabilityTable.from_assets(
            [
                asset_factory("wind", 100.0, stability=0.3),
                asset_factory("wind", 100.0, stability=0.9),
                asset_factory("nuclear", 1000.0),
            ]
        )

        assert table.coefficient("Wind") == 0.3
        assert table.coefficient("Nuclear") == 1.0

    def test_unknown_label_default(self) -> None:
        """Test missing labels fall back to the default coefficient."""
        table = StabilityTable({"Wind": 0.2})
        assert table.coefficient("Solar") == 1.0
        assert table.coefficient("Solar", default=0.0) == 0.0

    def test_weighted_average(self) -> None:
        """Test stability is weighted by generated MW."""
        table = StabilityTable({"Hydroelectric": 0.8, "Wind": 0.2})

        score = table.weighted_average({"Hydroelectric": 300.0, "Wind": 100.0})

        assert score == pytest.approx((0.8 * 300 + 0.2 * 100) / 400)

    def test_no_generation_scores_zero(self) -> None:
        """Test an empty or all-zero mix scores zero."""
        table = StabilityTable({"Wind": 0.2})
        assert table.weighted_average({}) == 0.0
        assert table.weighted_average({"Wind": 0.0}) == 0.0

    def test_unknown_labels_carry_no_weight(self) -> None:
        """Test classes missing from the table are ignored."""
        table = StabilityTable({"Nuclear": 1.0})
        assert table.weighted_average({"Nuclear": 100.0, "Tidal": 900.0}) == 1.0


class TestSimulationRecorder:
    """Tests for the per-minute result recorder."""

    def test_accumulates_totals(self) -> None:
        """Test energy totals and shortage counts."""
        recorder = SimulationRecorder()
        recorder.record(minute_result(0, 0.0, 600.0, 0.0))
        recorder.record(minute_result(1, 600.0, 600.0, 0.9))
        recorder.record(minute_result(2, 300.0, 600.0, 0.9))

        result = recorder.build("blackout_test", datetime(2025, 4, 28, 12, 0))

        assert len(recorder) == 3
        assert result.total_generated_mwh == pytest.approx(900.0 / 60.0)
        assert result.total_demand_mwh == pytest.approx(1800.0 / 60.0)
        assert result.shortage_minutes == 2
        assert result.end_time == datetime(2025, 4, 28, 12, 2)

    def test_unstable_minutes_skip_warmup(self) -> None:
        """Test instability is only counted once hydro is synchronized."""
        recorder = SimulationRecorder(stability_threshold=0.7, stable_from_minute=2)
        recorder.record(minute_result(0, 100.0, 100.0, 0.1))
        recorder.record(minute_result(1, 100.0, 100.0, 0.1))
        recorder.record(minute_result(2, 100.0, 100.0, 0.5))
        recorder.record(minute_result(3, 0.0, 100.0, 0.0))
        recorder.record(minute_result(4, 100.0, 100.0, 0.8))

        assert recorder.unstable_minutes == 1

    def test_out_of_order_rejected(self) -> None:
        """Test minutes must be recorded consecutively."""
        recorder = SimulationRecorder()
        recorder.record(minute_result(0, 0.0, 0.0, 0.0))

        with pytest.raises(ValueError, match="recorded after"):
            recorder.record(minute_result(2, 0.0, 0.0, 0.0))

    def test_empty_build(self) -> None:
        """Test building with no minutes ends where it started."""
        start = datetime(2025, 4, 28, 12, 0)
        result = SimulationRecorder().build("blackout_empty", start)

        assert result.minutes == []
        assert result.end_time == start
        assert result.total_generated_mwh == 0.0
