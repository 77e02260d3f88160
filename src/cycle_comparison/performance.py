"""
Performance Module
Heat and work accounting for the Atkinson cycle and loop work of every trace.

Date:   15-10-2026

Atkinson accounting (air standard, per cycle charge)
----------------------------------------------------
    m     = P1·V1 / (R·T1)
    Q_in  = m·cv·(T3 − T2)
    Q_out = m·cp·(T4 − T1)      (isobaric accounting, default)
          = m·cv·(T4 − T1)      (isochoric accounting)
    W_net = Q_in − Q_out
    η     = W_net / Q_in · 100  [%]
"""

from dataclasses import dataclass
from typing import Iterable

from scipy.integrate import trapezoid

from .cycle_config import CycleParameters, CycleType, HeatRejection
from .cycles import CycleStates
from .process_curves import CycleTrace
from .thermodynamics import IdealGas


@dataclass(frozen=True)
class CyclePerformance:
    """Heat/work summary of a four-state cycle.

    Energies in kJ, temperatures in K, efficiency in percent.
    """

    mass: float
    temperatures: tuple  # (T1, T2, T3, T4)
    heat_input: float
    heat_rejected: float
    net_work: float
    thermal_efficiency: float


def analyze_atkinson(cycle: CycleStates, params: CycleParameters) -> CyclePerformance:
    """Heat input, heat rejected, net work and efficiency of the Atkinson cycle.

    Raises
    ------
    ValueError
        If ``cycle`` is not an Atkinson cycle.
    """
    if cycle.cycle_type is not CycleType.ATKINSON:
        raise ValueError(f"Expected an Atkinson cycle, got {cycle.cycle_type.value}")

    gas = IdealGas(params.gas_constant, params.cv, params.cp, params.gamma)
    s1, s2, s3, s4 = cycle.states

    mass = gas.mass(s1.pressure, s1.volume, s1.temperature)
    q_in = gas.heat_transfer_cv(mass, s2.temperature, s3.temperature)

    if params.heat_rejection is HeatRejection.ISOBARIC:
        q_out = gas.heat_transfer_cp(mass, s1.temperature, s4.temperature)
    else:
        q_out = gas.heat_transfer_cv(mass, s1.temperature, s4.temperature)

    w_net = q_in - q_out

    return CyclePerformance(
        mass=mass,
        temperatures=(s1.temperature, s2.temperature, s3.temperature, s4.temperature),
        heat_input=q_in,
        heat_rejected=q_out,
        net_work=w_net,
        thermal_efficiency=w_net / q_in * 100.0,
    )


def loop_work(trace: CycleTrace) -> float:
    """Enclosed work  W = ∮ P dv  of a closed trace  [kJ/kg].

    Uses the scipy trapezoidal rule over the ordered trace. A clockwise
    power loop gives W > 0; isochoric legs contribute nothing.
    """
    return float(trapezoid(trace.pressure, trace.volume))


def create_performance_report(performance: CyclePerformance, title: str = "Atkinson") -> str:
    """Formatted Atkinson performance report (two decimals, explicit units)."""
    T1, T2, T3, T4 = performance.temperatures
    report = [
        f"=== {title} Cycle Performance ===",
        f"T1 = {T1:.2f} K, T2 = {T2:.2f} K",
        f"T3 = {T3:.2f} K, T4 = {T4:.2f} K",
        "",
        f"Heat Input (Q_in) = {performance.heat_input:.2f} kJ",
        f"Heat Rejected (Q_out) = {performance.heat_rejected:.2f} kJ",
        f"Net Work Output (W_net) = {performance.net_work:.2f} kJ",
        f"Thermal Efficiency = {performance.thermal_efficiency:.2f}%",
        "",
    ]
    return "\n".join(report)


def create_loop_work_report(traces: Iterable[CycleTrace]) -> str:
    """One line per trace with its enclosed P-v loop work."""
    report = ["=== P-V Loop Work (∮P dV) ==="]
    for trace in traces:
        report.append(f"{trace.label + ':':<16} {loop_work(trace):8.2f} kJ/kg")
    report.append("")
    return "\n".join(report)
