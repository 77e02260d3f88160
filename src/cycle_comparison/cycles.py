"""
Cycle Solver Module
Derives the state points of the Dual, Otto, Diesel and Atkinson cycles.

Date:   15-10-2026
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

from .cycle_config import CycleParameters, CycleType
from .thermodynamics import IdealGas, StatePoint


class ProcessType(Enum):
    """Process connecting two consecutive state points."""

    ISENTROPIC = "isentropic"
    ISOCHORIC = "isochoric"
    ISOBARIC = "isobaric"


@dataclass(frozen=True)
class CycleStates:
    """State points of one closed cycle.

    ``processes[i]`` connects ``states[i]`` to ``states[i + 1]``; the last
    process closes the loop back to ``states[0]``.
    """

    cycle_type: CycleType
    states: Tuple[StatePoint, ...]
    processes: Tuple[ProcessType, ...]

    def __post_init__(self) -> None:
        if len(self.states) < 2:
            raise ValueError(f"A cycle needs ≥ 2 states, got {len(self.states)}")
        if len(self.processes) != len(self.states):
            raise ValueError(
                f"processes length {len(self.processes)} must equal "
                f"states length {len(self.states)}"
            )

    @property
    def label(self) -> str:
        return self.cycle_type.label

    def legs(self):
        """Yield (start, end, process) for every leg in process order."""
        n = len(self.states)
        for i, process in enumerate(self.processes):
            yield self.states[i], self.states[(i + 1) % n], process


_S = ProcessType.ISENTROPIC
_V = ProcessType.ISOCHORIC
_P = ProcessType.ISOBARIC


class CycleSolver:
    """Closed-form state-point solver for the compared air-standard cycles.

    All four cycles share state 1 and the isentropic compression 1→2;
    every expansion ends at the state-1 volume.
    """

    def __init__(self, params: CycleParameters) -> None:
        self.params = params
        self.gas = IdealGas(
            gas_constant=params.gas_constant,
            cv=params.cv,
            cp=params.cp,
            gamma=params.gamma,
        )
        self.state_1 = self.gas.state(params.initial_pressure, params.initial_temperature)
        self.state_2 = self.gas.compress_isentropic(
            self.state_1, params.compression_ratio
        )

    def dual(self) -> CycleStates:
        """1→2 s, 2→3 v (rp), 3→4 p (cutoff), 4→5 s to v1, 5→1 v."""
        s3 = self.gas.heat_constant_volume_by_ratio(self.state_2, self.params.pressure_ratio)
        s4 = self.gas.heat_constant_pressure(s3, self.params.cutoff_ratio)
        s5 = self.gas.isentropic_to_volume(s4, self.state_1.volume)
        return CycleStates(
            CycleType.DUAL,
            (self.state_1, self.state_2, s3, s4, s5),
            (_S, _V, _P, _S, _V),
        )

    def otto(self) -> CycleStates:
        """1→2 s, 2→3 v (rp), 3→4 s to v1, 4→1 v."""
        s3 = self.gas.heat_constant_volume_by_ratio(self.state_2, self.params.pressure_ratio)
        s4 = self.gas.isentropic_to_volume(s3, self.state_1.volume)
        return CycleStates(
            CycleType.OTTO,
            (self.state_1, self.state_2, s3, s4),
            (_S, _V, _S, _V),
        )

    def diesel(self) -> CycleStates:
        """1→2 s, 2→3 p (cutoff), 3→4 s to v1, 4→1 v."""
        s3 = self.gas.heat_constant_pressure(self.state_2, self.params.cutoff_ratio)
        s4 = self.gas.isentropic_to_volume(s3, self.state_1.volume)
        return CycleStates(
            CycleType.DIESEL,
            (self.state_1, self.state_2, s3, s4),
            (_S, _P, _S, _V),
        )

    def atkinson(self) -> CycleStates:
        """1→2 s, 2→3 v to the fixed peak temperature, 3→4 s to v1, 4→1 v."""
        s3 = self.gas.heat_constant_volume_to_temperature(
            self.state_2, self.params.atkinson_peak_temperature
        )
        s4 = self.gas.isentropic_to_volume(s3, self.state_1.volume)
        return CycleStates(
            CycleType.ATKINSON,
            (self.state_1, self.state_2, s3, s4),
            (_S, _V, _S, _V),
        )

    def solve(self, cycle_type: CycleType) -> CycleStates:
        """State points for one cycle type."""
        solvers = {
            CycleType.DUAL: self.dual,
            CycleType.OTTO: self.otto,
            CycleType.DIESEL: self.diesel,
            CycleType.ATKINSON: self.atkinson,
        }
        return solvers[cycle_type]()

    def solve_all(self) -> Dict[CycleType, CycleStates]:
        """State points for every cycle, in plotting order."""
        return {cycle_type: self.solve(cycle_type) for cycle_type in CycleType}
