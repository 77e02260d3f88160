"""
Cycle Comparison Example
Demonstrates programmatic use of the cycle comparison package.

Date: 15-10-2026
"""

import os

# Headless environment check for plot exports
if "DISPLAY" not in os.environ and os.name != "nt":
    import matplotlib
    matplotlib.use("Agg")
    print("Physical display not detected. Using 'Agg' backend for plot exports.")

from cycle_comparison.cycle_config import (
    CycleParameters,
    CycleType,
    HeatRejection,
    create_default_parameters,
)
from cycle_comparison.cycles import CycleSolver
from cycle_comparison.performance import (
    analyze_atkinson,
    create_performance_report,
    loop_work,
)
from cycle_comparison.process_curves import build_cycle_trace
from cycle_comparison.visualization import CyclePlotter


def example_1_state_tables():
    """Example 1: State points of every cycle"""

    print("=" * 70)
    print("EXAMPLE 1: State Points (reference parameters)")
    print("=" * 70)

    params = create_default_parameters()
    cycles = CycleSolver(params).solve_all()

    for cycle in cycles.values():
        print(f"\n{cycle.label}")
        print("-" * 46)
        print(f"  {'State':<6}{'P (kPa)':>12}{'v (m³/kg)':>14}{'T (K)':>12}")
        for i, s in enumerate(cycle.states, start=1):
            print(f"  {i:<6}{s.pressure:>12.2f}{s.volume:>14.5f}{s.temperature:>12.2f}")
    print()


def example_2_heat_rejection_accounting():
    """Example 2: Atkinson efficiency under both heat-rejection accountings"""

    print("=" * 70)
    print("EXAMPLE 2: Atkinson Heat-Rejection Accounting")
    print("=" * 70)
    print()

    for heat_rejection in HeatRejection:
        params = create_default_parameters(heat_rejection)
        cycle = CycleSolver(params).atkinson()
        performance = analyze_atkinson(cycle, params)
        print(f"[{heat_rejection.value}]")
        print(create_performance_report(performance))


def example_3_compression_ratio_sweep():
    """Example 3: Loop work versus compression ratio"""

    print("=" * 70)
    print("EXAMPLE 3: Loop Work vs Compression Ratio")
    print("=" * 70)
    print()

    print(f"  {'rc':>4}" + "".join(f"{t.label:>16}" for t in CycleType))
    for rc in (8.0, 10.0, 12.0, 14.0, 16.0):
        params = CycleParameters(compression_ratio=rc)
        cycles = CycleSolver(params).solve_all()
        works = [
            loop_work(build_cycle_trace(c, params.gamma, params.samples_per_leg))
            for c in cycles.values()
        ]
        print(f"  {rc:>4.0f}" + "".join(f"{w:>16.2f}" for w in works))
    print()


def example_4_chart():
    """Example 4: Save the comparison chart"""

    params = create_default_parameters()
    cycles = CycleSolver(params).solve_all()
    traces = {
        t: build_cycle_trace(c, params.gamma, params.samples_per_leg)
        for t, c in cycles.items()
    }
    CyclePlotter().plot_cycle_comparison(
        traces, cycles, params.compression_ratio, save_path="example_pv_comparison.png"
    )


if __name__ == "__main__":
    example_1_state_tables()
    example_2_heat_rejection_accounting()
    example_3_compression_ratio_sweep()
    example_4_chart()
