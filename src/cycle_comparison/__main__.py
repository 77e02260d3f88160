"""
CLI entry point for cycle_comparison.
"""
import argparse
import sys
from .cycle_config import CycleParameters, CycleType, HeatRejection, create_default_parameters
from .cycles import CycleSolver
from .process_curves import build_cycle_trace
from .performance import analyze_atkinson, create_performance_report, create_loop_work_report
from .visualization import CyclePlotter

DEFAULT_OUTPUT = "Thermodynamic_Cycles_Comparison.png"


def run_comparison(params: CycleParameters, output: str = DEFAULT_OUTPUT, show: bool = False):
    solver = CycleSolver(params)
    cycles = solver.solve_all()
    traces = {
        cycle_type: build_cycle_trace(cycle, params.gamma, params.samples_per_leg)
        for cycle_type, cycle in cycles.items()
    }

    performance = analyze_atkinson(cycles[CycleType.ATKINSON], params)
    print(create_performance_report(performance))
    print(create_loop_work_report(traces.values()))

    plotter = CyclePlotter()
    plotter.plot_cycle_comparison(
        traces, cycles, params.compression_ratio, save_path=output, show=show
    )
    return performance


def main():
    parser = argparse.ArgumentParser(
        description="Compare Dual, Otto, Diesel and Atkinson cycles on a P-V diagram"
    )
    parser.add_argument("--output", default=DEFAULT_OUTPUT, help=f"PNG output path (default: {DEFAULT_OUTPUT})")
    parser.add_argument(
        "--heat-rejection",
        choices=[h.value for h in HeatRejection],
        default=HeatRejection.ISOBARIC.value,
        help="Specific heat used for the Atkinson heat rejection (default: isobaric)",
    )
    parser.add_argument("--show", action="store_true", help="Display the chart after saving")

    args = parser.parse_args()
    params = create_default_parameters(HeatRejection(args.heat_rejection))

    try:
        run_comparison(params, args.output, args.show)
    except OSError as exc:
        print(f"Error: could not write '{args.output}': {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
