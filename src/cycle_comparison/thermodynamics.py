"""
Thermodynamics Module
Closed-form air-standard process relations for an ideal gas with
constant specific heats.

Date:   15-10-2026

Mathematical Basis
------------------
Units: P [kPa], v [m³/kg], T [K], energies [kJ].

Ideal gas:
    P·v = R·T

Isentropic process (reversible, adiabatic):
    P·v^γ = const        T·v^(γ−1) = const

Isochoric process (v = const):
    P2/P1 = T2/T1

Isobaric process (P = const):
    v2/v1 = T2/T1
"""

from dataclasses import dataclass


# ── Data classes ─────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class StatePoint:
    """Immutable (P, v, T) state at a cycle vertex.

    Attributes
    ----------
    pressure    : kPa  (must be > 0)
    volume      : m³/kg (must be > 0)
    temperature : K    (must be > 0)
    """

    pressure: float
    volume: float
    temperature: float

    def __post_init__(self) -> None:
        if self.pressure <= 0.0:
            raise ValueError(f"Pressure must be > 0 kPa, got {self.pressure}")
        if self.volume <= 0.0:
            raise ValueError(f"Volume must be > 0 m³/kg, got {self.volume}")
        if self.temperature <= 0.0:
            raise ValueError(f"Temperature must be > 0 K, got {self.temperature}")

    def isentropic_constant(self, gamma: float) -> float:
        """P·v^γ for this state."""
        return self.pressure * self.volume**gamma


# ── Working fluid ────────────────────────────────────────────────────────────


class IdealGas:
    """Calorically perfect ideal gas (constant cv, cp, γ).

    The defaults describe cold air-standard air.
    """

    def __init__(
        self,
        gas_constant: float = 0.287,
        cv: float = 0.718,
        cp: float = 1.005,
        gamma: float = 1.4,
    ) -> None:
        """
        Parameters
        ----------
        gas_constant : float  R  [kJ/(kg·K)]
        cv           : float  [kJ/(kg·K)]
        cp           : float  [kJ/(kg·K)]
        gamma        : float  Ratio used by the isentropic relations.

        Raises
        ------
        ValueError
            If any property is non-physical.
        """
        if gas_constant <= 0.0:
            raise ValueError(f"gas_constant must be > 0, got {gas_constant}")
        if cv <= 0.0 or cp <= 0.0:
            raise ValueError(f"cv and cp must be > 0, got cv={cv}, cp={cp}")
        if gamma <= 1.0:
            raise ValueError(f"gamma must be > 1, got {gamma}")

        self.R = gas_constant
        self.cv = cv
        self.cp = cp
        self.gamma = gamma

    def state(self, pressure: float, temperature: float) -> StatePoint:
        """State at (P, T) with v from the ideal gas law."""
        return StatePoint(
            pressure=pressure,
            volume=self.R * temperature / pressure,
            temperature=temperature,
        )

    def mass(self, pressure: float, volume: float, temperature: float) -> float:
        """Gas mass  m = P·V/(R·T)  [kg]."""
        return pressure * volume / (self.R * temperature)

    # ── Isentropic processes ──────────────────────────────────────────────

    def isentropic_to_volume(
        self, state: StatePoint, volume_final: float
    ) -> StatePoint:
        """Isentropic compression or expansion to volume_final.

            P2 = P1·(v1/v2)^γ        T2 = T1·(v1/v2)^(γ−1)

        The direction is encoded in the volume ratio (> 1 for compression).
        """
        if volume_final <= 0.0:
            raise ValueError(f"volume_final must be > 0 m³/kg, got {volume_final}")
        ratio = state.volume / volume_final
        return StatePoint(
            pressure=state.pressure * ratio**self.gamma,
            volume=volume_final,
            temperature=state.temperature * ratio ** (self.gamma - 1.0),
        )

    def compress_isentropic(
        self, state: StatePoint, compression_ratio: float
    ) -> StatePoint:
        """Isentropic compression by compression_ratio = v1/v2."""
        if compression_ratio <= 0.0:
            raise ValueError(
                f"compression_ratio must be > 0, got {compression_ratio}"
            )
        return StatePoint(
            pressure=state.pressure * compression_ratio**self.gamma,
            volume=state.volume / compression_ratio,
            temperature=state.temperature * compression_ratio ** (self.gamma - 1.0),
        )

    # ── Constant-volume heat addition ─────────────────────────────────────

    def heat_constant_volume_by_ratio(
        self, state: StatePoint, pressure_ratio: float
    ) -> StatePoint:
        """Constant-volume process with P2 = pressure_ratio·P1 (T scales alike)."""
        if pressure_ratio <= 0.0:
            raise ValueError(f"pressure_ratio must be > 0, got {pressure_ratio}")
        return StatePoint(
            pressure=state.pressure * pressure_ratio,
            volume=state.volume,
            temperature=state.temperature * pressure_ratio,
        )

    def heat_constant_volume_to_temperature(
        self, state: StatePoint, temperature_final: float
    ) -> StatePoint:
        """Constant-volume process to a given temperature; P2 = P1·T2/T1."""
        if temperature_final <= 0.0:
            raise ValueError(
                f"temperature_final must be > 0 K, got {temperature_final}"
            )
        return StatePoint(
            pressure=state.pressure * (temperature_final / state.temperature),
            volume=state.volume,
            temperature=temperature_final,
        )

    # ── Constant-pressure heat addition ───────────────────────────────────

    def heat_constant_pressure(
        self, state: StatePoint, cutoff_ratio: float
    ) -> StatePoint:
        """Constant-pressure process with v2 = cutoff_ratio·v1 (T scales alike)."""
        if cutoff_ratio <= 0.0:
            raise ValueError(f"cutoff_ratio must be > 0, got {cutoff_ratio}")
        return StatePoint(
            pressure=state.pressure,
            volume=state.volume * cutoff_ratio,
            temperature=state.temperature * cutoff_ratio,
        )

    # ── Energy accounting ─────────────────────────────────────────────────

    def heat_transfer_cv(
        self, mass: float, temperature_1: float, temperature_2: float
    ) -> float:
        """Q = m·cv·(T2 − T1)  [kJ]."""
        return mass * self.cv * (temperature_2 - temperature_1)

    def heat_transfer_cp(
        self, mass: float, temperature_1: float, temperature_2: float
    ) -> float:
        """Q = m·cp·(T2 − T1)  [kJ]."""
        return mass * self.cp * (temperature_2 - temperature_1)
