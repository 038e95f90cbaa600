"""Tests for availability gates, the solar model and demand profiles."""

from datetime import datetime, time

import numpy as np
import pytest

from gridrestart.generators import (
    AvailabilityGates,
    DemandProfileGenerator,
    minute_of_day,
    solar_efficiency,
)


class TestAvailabilityGates:
    """Tests for the staged restart schedule."""

    def test_only_hydro_at_start(self) -> None:
        """Test hydro is the only class open right after the blackout."""
        gates = AvailabilityGates.at_minute(0)

        assert gates.hydro
        assert not gates.wind
        assert not gates.geothermal
        assert not gates.solar
        assert not gates.thermal
        assert not gates.baseload
        assert gates.renewable_order() == ["Hydroelectric"]

    @pytest.mark.parametrize(
        ("attribute", "opens_at"),
        [("wind", 7), ("geothermal", 61), ("thermal", 500), ("baseload", 1500)],
    )
    def test_gate_opens_at_minute(self, attribute: str, opens_at: int) -> None:
        """Test each gate opens exactly at its restart minute."""
        assert not getattr(AvailabilityGates.at_minute(opens_at - 1), attribute)
        assert getattr(AvailabilityGates.at_minute(opens_at), attribute)

    def test_coal_closes_at_minute_1000(self) -> None:
        """Test the coal window ends at minute 1000."""
        assert AvailabilityGates.at_minute(999).coal
        assert not AvailabilityGates.at_minute(1000).coal

    def test_solar_window_repeats_daily(self) -> None:
        """Test the solar window recurs each simulated day."""
        assert not AvailabilityGates.at_minute(499).solar
        assert AvailabilityGates.at_minute(500).solar
        assert AvailabilityGates.at_minute(949).solar
        assert not AvailabilityGates.at_minute(950).solar
        assert AvailabilityGates.at_minute(1440 + 600).solar
        assert not AvailabilityGates.at_minute(1440 + 100).solar

    def test_renewable_merit_order(self) -> None:
        """Test renewables are listed in merit order."""
        gates = AvailabilityGates.at_minute(600)
        assert gates.renewable_order() == [
            "Hydroelectric",
            "Wind",
            "Geothermal",
            "Solar",
        ]


class TestSolarModel:
    """Tests for the solar irradiance model."""

    def test_minute_of_day_wraps(self) -> None:
        """Test wall-clock minutes wrap at midnight."""
        start = datetime(2025, 4, 28, 23, 0)
        assert minute_of_day(start, 0) == 1380
        assert minute_of_day(start, 90) == 30

    def test_dark_at_night(self) -> None:
        """Test no output before sunrise or after sunset."""
        start = datetime(2025, 4, 28, 0, 0)
        assert solar_efficiency(start, 300) == 0.0
        assert solar_efficiency(start, 1100) == 0.0

    def test_peak_at_noon(self) -> None:
        """Test full output at solar noon."""
        start = datetime(2025, 4, 28, 0, 0)
        assert solar_efficiency(start, 720) == pytest.approx(1.0)

    def test_sine_profile(self) -> None:
        """Test the efficiency follows a sine lobe from 06:00 to 18:00."""
        start = datetime(2025, 4, 28, 6, 0)
        assert solar_efficiency(start, 0) == pytest.approx(0.0, abs=1e-12)
        assert solar_efficiency(start, 240) == pytest.approx(np.sin(np.pi / 3))
        assert solar_efficiency(start, 720) == pytest.approx(0.0, abs=1e-12)

    def test_uses_wall_clock_of_start(self) -> None:
        """Test the same offset gives different output for different starts."""
        morning = solar_efficiency(datetime(2025, 4, 28, 8, 0), 60)
        evening = solar_efficiency(datetime(2025, 4, 28, 20, 0), 60)
        assert morning > 0.0
        assert evening == 0.0


class TestDemandProfileGenerator:
    """Tests for the synthetic demand generator."""

    def test_one_value_per_minute(self) -> None:
        """Test a day has 1440 points starting at midnight."""
        series = DemandProfileGenerator().generate_day()

        assert len(series) == 1440
        assert series.points[0].time_of_day == time(0, 0)
        assert series.points[-1].time_of_day == time(23, 59)

    def test_within_base_and_peak(self) -> None:
        """Test a noiseless profile stays between base and peak."""
        series = DemandProfileGenerator(base_mw=20000.0, peak_mw=32000.0).generate_day()
        values = np.array(series.values)

        assert values.min() >= 20000.0 - 0.1
        assert values.max() == pytest.approx(32000.0, abs=0.1)

    def test_evening_peak(self) -> None:
        """Test the evening is busier than the night."""
        values = DemandProfileGenerator().generate_day().values
        assert values[20 * 60 + 30] > values[4 * 60]

    def test_seeded_noise_reproducible(self) -> None:
        """Test identical seeds produce identical profiles."""
        first = DemandProfileGenerator(noise_std_mw=200.0, seed=42).generate_day()
        second = DemandProfileGenerator(noise_std_mw=200.0, seed=42).generate_day()
        assert first.values == second.values

    def test_peak_below_base_rejected(self) -> None:
        """Test an inverted profile is rejected."""
        with pytest.raises(ValueError, match="peak_mw"):
            DemandProfileGenerator(base_mw=30000.0, peak_mw=20000.0)

    def test_flat_profile(self) -> None:
        """Test a constant profile."""
        series = DemandProfileGenerator().generate_flat(500.0, minutes=60)
        assert series.values == [500.0] * 60
