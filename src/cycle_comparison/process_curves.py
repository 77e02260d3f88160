"""
Process Curves Module
Samples each process leg into (v, P) arrays and joins them into closed traces.

Date:   15-10-2026

Sampling rules
--------------
Isentropic : n evenly spaced volumes,  P = P_start·(v_start/v)^γ
Isobaric   : n evenly spaced volumes,  P = P_start
Isochoric  : the two endpoints only (vertical line)

Every curve starts and ends exactly on its declared state points.
"""

from dataclasses import dataclass
from typing import List

import numpy as np
import numpy.typing as npt

from .cycle_config import CycleType
from .cycles import CycleStates, ProcessType
from .thermodynamics import StatePoint


@dataclass
class ProcessCurve:
    """Sampled (v, P) points of one process leg."""

    process: ProcessType
    volume: npt.NDArray[np.float64]  # [m³/kg]
    pressure: npt.NDArray[np.float64]  # [kPa]

    def __post_init__(self) -> None:
        if len(self.volume) != len(self.pressure):
            raise ValueError(
                f"volume and pressure must have the same length, "
                f"got {len(self.volume)} and {len(self.pressure)}"
            )


def generate_process_curve(
    start: StatePoint,
    end: StatePoint,
    process: ProcessType,
    gamma: float,
    samples: int = 100,
) -> ProcessCurve:
    """Sample one process leg from start to end.

    Parameters
    ----------
    start, end : StatePoint   leg endpoints
    process    : ProcessType
    gamma      : float        used by isentropic legs
    samples    : int          points for isentropic/isobaric legs (≥ 2)

    Returns
    -------
    ProcessCurve

    Raises
    ------
    ValueError
        If samples < 2.
    """
    if samples < 2:
        raise ValueError(f"samples must be ≥ 2, got {samples}")

    if process is ProcessType.ISOCHORIC:
        volume = np.array([start.volume, end.volume], dtype=float)
        pressure = np.array([start.pressure, end.pressure], dtype=float)
        return ProcessCurve(process, volume, pressure)

    volume = np.linspace(start.volume, end.volume, samples)

    if process is ProcessType.ISOBARIC:
        pressure = np.full(samples, start.pressure, dtype=float)
    else:
        pressure = start.pressure * (start.volume / volume) ** gamma

    # Pin endpoints to the declared states (no power-law round-off)
    pressure[0] = start.pressure
    pressure[-1] = end.pressure
    return ProcessCurve(process, volume, pressure)


@dataclass
class CycleTrace:
    """Closed P-v loop of one cycle, legs in process order."""

    cycle_type: CycleType
    curves: List[ProcessCurve]

    @property
    def label(self) -> str:
        return self.cycle_type.label

    @property
    def volume(self) -> npt.NDArray[np.float64]:
        return np.concatenate([c.volume for c in self.curves])

    @property
    def pressure(self) -> npt.NDArray[np.float64]:
        return np.concatenate([c.pressure for c in self.curves])


def build_cycle_trace(
    cycle: CycleStates, gamma: float, samples: int = 100
) -> CycleTrace:
    """Concatenate the sampled legs of a cycle, closing back to state 1."""
    curves = [
        generate_process_curve(start, end, process, gamma, samples)
        for start, end, process in cycle.legs()
    ]
    return CycleTrace(cycle.cycle_type, curves)
