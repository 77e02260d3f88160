"""
Unit Tests for the Performance Module

Date:   15-10-2026
"""

import pytest

from cycle_comparison.cycle_config import (
    CycleType,
    HeatRejection,
    create_default_parameters,
)
from cycle_comparison.cycles import CycleSolver
from cycle_comparison.performance import (
    analyze_atkinson,
    create_loop_work_report,
    create_performance_report,
    loop_work,
)
from cycle_comparison.process_curves import build_cycle_trace


def _solve(heat_rejection=HeatRejection.ISOBARIC):
    params = create_default_parameters(heat_rejection)
    cycles = CycleSolver(params).solve_all()
    return params, cycles


class TestAnalyzeAtkinson:

    def setup_method(self):
        self.params, self.cycles = _solve()
        self.perf = analyze_atkinson(self.cycles[CycleType.ATKINSON], self.params)

    def test_unit_mass(self):
        assert self.perf.mass == pytest.approx(1.0, rel=1e-12)

    def test_temperatures(self):
        T1, T2, T3, T4 = self.perf.temperatures
        assert T1 == 300.0
        assert T2 == pytest.approx(810.58, abs=0.1)
        assert T3 == 1320.0
        assert T4 == pytest.approx(488.54, abs=0.1)

    def test_heat_input(self):
        T1, T2, T3, T4 = self.perf.temperatures
        assert self.perf.heat_input == pytest.approx(0.718 * (T3 - T2), rel=1e-12)
        assert self.perf.heat_input == pytest.approx(365.77, abs=0.05)

    def test_isobaric_heat_rejected(self):
        T1, _, _, T4 = self.perf.temperatures
        assert self.perf.heat_rejected == pytest.approx(1.005 * (T4 - T1), rel=1e-12)

    def test_net_work_is_balance(self):
        assert self.perf.net_work == pytest.approx(
            self.perf.heat_input - self.perf.heat_rejected, rel=1e-12
        )

    def test_efficiency_bounds(self):
        assert 0.0 < self.perf.thermal_efficiency < 100.0
        assert self.perf.thermal_efficiency == pytest.approx(48.195, abs=0.01)

    def test_isochoric_accounting_matches_otto_limit(self):
        """With cv rejection η = 1 − rc^(1−γ)."""
        params, cycles = _solve(HeatRejection.ISOCHORIC)
        perf = analyze_atkinson(cycles[CycleType.ATKINSON], params)
        expected = (1.0 - 12.0 ** (1.0 - 1.4)) * 100.0
        assert perf.thermal_efficiency == pytest.approx(expected, rel=1e-9)
        assert 50.0 < perf.thermal_efficiency < 65.0

    def test_rejects_other_cycles(self):
        with pytest.raises(ValueError):
            analyze_atkinson(self.cycles[CycleType.OTTO], self.params)


class TestLoopWork:

    def setup_method(self):
        self.params, self.cycles = _solve()
        self.traces = {
            t: build_cycle_trace(c, self.params.gamma, self.params.samples_per_leg)
            for t, c in self.cycles.items()
        }

    def test_positive_for_power_cycles(self):
        for trace in self.traces.values():
            assert loop_work(trace) > 0.0

    def test_atkinson_loop_matches_isochoric_balance(self):
        """∮P dv equals Q_in − m·cv·(T4 − T1) for the drawn loop."""
        params, cycles = _solve(HeatRejection.ISOCHORIC)
        perf = analyze_atkinson(cycles[CycleType.ATKINSON], params)
        assert loop_work(self.traces[CycleType.ATKINSON]) == pytest.approx(
            perf.net_work, rel=1e-2
        )

    def test_dual_encloses_more_than_otto_and_diesel(self):
        """The Dual cycle adds heat at both constant v and constant P."""
        dual = loop_work(self.traces[CycleType.DUAL])
        assert dual > loop_work(self.traces[CycleType.OTTO])
        assert dual > loop_work(self.traces[CycleType.DIESEL])


class TestReports:

    def setup_method(self):
        self.params, self.cycles = _solve()
        self.perf = analyze_atkinson(self.cycles[CycleType.ATKINSON], self.params)

    def test_performance_report_lines(self):
        lines = create_performance_report(self.perf).splitlines()
        assert lines[0] == "=== Atkinson Cycle Performance ==="
        assert lines[1] == "T1 = 300.00 K, T2 = 810.58 K"
        assert lines[2] == "T3 = 1320.00 K, T4 = 488.54 K"
        assert lines[4].startswith("Heat Input (Q_in) = ")
        assert lines[4].endswith(" kJ")
        assert lines[5].startswith("Heat Rejected (Q_out) = ")
        assert lines[6].startswith("Net Work Output (W_net) = ")
        assert lines[7] == "Thermal Efficiency = 48.20%"

    def test_performance_report_deterministic(self):
        again = analyze_atkinson(
            CycleSolver(self.params).atkinson(), self.params
        )
        assert create_performance_report(again) == create_performance_report(self.perf)

    def test_loop_work_report(self):
        traces = [
            build_cycle_trace(c, self.params.gamma) for c in self.cycles.values()
        ]
        report = create_loop_work_report(traces)
        assert report.startswith("=== P-V Loop Work")
        for label in ("Dual Cycle:", "Otto Cycle:", "Diesel Cycle:", "Atkinson Cycle:"):
            assert label in report
        assert report.count("kJ/kg") == 4


if __name__ == "__main__":
    pytest.main([__file__, "-v", "--tb=short"])
