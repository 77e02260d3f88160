"""
Cycle Configuration Module
Defines the air-standard parameters shared by the four compared cycles.

Date:   15-10-2026
"""

import warnings
from dataclasses import dataclass
from typing import Dict, List
from enum import Enum

# ── Enumerations ──────────────────────────────────────────────────────────────


class CycleType(Enum):
    """Compared air-standard cycles, in plotting order."""

    DUAL = "dual"
    OTTO = "otto"
    DIESEL = "diesel"
    ATKINSON = "atkinson"

    @property
    def label(self) -> str:
        return f"{self.value.title()} Cycle"


class HeatRejection(Enum):
    """Specific heat used when accounting the Atkinson heat rejection."""

    ISOBARIC = "isobaric"  # Q_out = m·cp·(T4 − T1)
    ISOCHORIC = "isochoric"  # Q_out = m·cv·(T4 − T1)


# ── Parameters ────────────────────────────────────────────────────────────────


@dataclass
class CycleParameters:
    """Air-standard cycle parameters (kJ, kPa, m³/kg, K).

    Attributes
    ----------
    gamma                     : specific heat ratio  (> 1)
    gas_constant              : kJ/(kg·K)
    cv                        : kJ/(kg·K)
    cp                        : kJ/(kg·K)
    initial_pressure          : kPa  P1
    initial_temperature       : K    T1
    compression_ratio         : V1/V2  (> 1)
    pressure_ratio            : P3/P2 for the Dual and Otto cycles  (> 1)
    cutoff_ratio              : volume ratio across constant-pressure addition  (> 1)
    expansion_ratio           : Atkinson expansion ratio; carried, not used in any derivation
    atkinson_peak_temperature : K    fixed T3 of the Atkinson cycle
    samples_per_leg           : points per swept process leg  (≥ 2)
    heat_rejection            : accounting used for the Atkinson Q_out
    """

    gamma: float = 1.4
    gas_constant: float = 0.287
    cv: float = 0.718
    cp: float = 1.005
    initial_pressure: float = 100.0
    initial_temperature: float = 300.0
    compression_ratio: float = 12.0
    pressure_ratio: float = 1.7
    cutoff_ratio: float = 1.55
    expansion_ratio: float = 17.0
    atkinson_peak_temperature: float = 1320.0
    samples_per_leg: int = 100
    heat_rejection: HeatRejection = HeatRejection.ISOBARIC

    # Typical ranges; values outside only raise a notice
    TYPICAL_RANGES = {
        "compression_ratio": (6.0, 25.0),
        "pressure_ratio": (1.0, 3.0),
        "cutoff_ratio": (1.0, 3.5),
    }

    def __post_init__(self) -> None:
        if self.gamma <= 1.0:
            raise ValueError(f"gamma must be > 1, got {self.gamma}")
        if self.gas_constant <= 0.0:
            raise ValueError(
                f"gas_constant must be > 0 kJ/(kg·K), got {self.gas_constant}"
            )
        if self.cv <= 0.0:
            raise ValueError(f"cv must be > 0 kJ/(kg·K), got {self.cv}")
        if self.cp <= self.cv:
            raise ValueError(f"cp must be > cv ({self.cv}), got {self.cp}")
        if self.initial_pressure <= 0.0:
            raise ValueError(
                f"initial_pressure must be > 0 kPa, got {self.initial_pressure}"
            )
        if self.initial_temperature <= 0.0:
            raise ValueError(
                f"initial_temperature must be > 0 K, got {self.initial_temperature}"
            )
        for name in ("compression_ratio", "pressure_ratio", "cutoff_ratio"):
            value = getattr(self, name)
            if value <= 1.0:
                raise ValueError(f"{name} must be > 1, got {value}")
        if self.expansion_ratio <= 0.0:
            raise ValueError(f"expansion_ratio must be > 0, got {self.expansion_ratio}")
        if self.samples_per_leg < 2:
            raise ValueError(
                f"samples_per_leg must be ≥ 2, got {self.samples_per_leg}"
            )

        self.samples_per_leg = int(self.samples_per_leg)
        self.heat_rejection = HeatRejection(self.heat_rejection)

        # Heat must be added between states 2 and 3
        if self.atkinson_peak_temperature <= self.compressed_temperature:
            raise ValueError(
                f"atkinson_peak_temperature ({self.atkinson_peak_temperature} K) must "
                f"exceed the end-of-compression temperature "
                f"({self.compressed_temperature:.2f} K)"
            )

        for msg in self.engineering_notices():
            warnings.warn(msg, stacklevel=3)

    # ── Derived properties ────────────────────────────────────────────────

    @property
    def initial_volume(self) -> float:
        """Specific volume at state 1  V1 = R·T1/P1  [m³/kg]."""
        return self.gas_constant * self.initial_temperature / self.initial_pressure

    @property
    def compressed_temperature(self) -> float:
        """Temperature after isentropic compression  T2 = T1·rc^(γ−1)  [K]."""
        return self.initial_temperature * self.compression_ratio ** (self.gamma - 1.0)

    def engineering_notices(self) -> List[str]:
        """Non-fatal remarks about parameters outside typical ranges."""
        notices: List[str] = []

        for name, (low, high) in self.TYPICAL_RANGES.items():
            value = getattr(self, name)
            if not (low <= value <= high):
                notices.append(
                    f"{name} {value:.2f} outside typical range [{low:g}, {high:g}]"
                )

        # Mayer's relation cp − cv = R
        mayer_error = abs((self.cp - self.cv) - self.gas_constant) / self.gas_constant
        if mayer_error > 0.01:
            notices.append(
                f"cp − cv = {self.cp - self.cv:.4f} differs from R = "
                f"{self.gas_constant:.4f} by {mayer_error*100:.1f}%"
            )

        gamma_error = abs(self.cp / self.cv - self.gamma) / self.gamma
        if gamma_error > 0.01:
            notices.append(
                f"cp/cv = {self.cp / self.cv:.4f} differs from gamma = "
                f"{self.gamma:.4f} by {gamma_error*100:.1f}%"
            )

        return notices

    # ── Serialisation ─────────────────────────────────────────────────────

    def to_dict(self) -> Dict:
        """Serialise parameters to a plain dictionary."""
        return {
            "gamma": self.gamma,
            "gas_constant": self.gas_constant,
            "cv": self.cv,
            "cp": self.cp,
            "initial_pressure": self.initial_pressure,
            "initial_temperature": self.initial_temperature,
            "compression_ratio": self.compression_ratio,
            "pressure_ratio": self.pressure_ratio,
            "cutoff_ratio": self.cutoff_ratio,
            "expansion_ratio": self.expansion_ratio,
            "atkinson_peak_temperature": self.atkinson_peak_temperature,
            "samples_per_leg": self.samples_per_leg,
            "heat_rejection": self.heat_rejection.value,
        }


# ── Factory functions ─────────────────────────────────────────────────────────


def create_default_parameters(
    heat_rejection: HeatRejection = HeatRejection.ISOBARIC,
) -> CycleParameters:
    """Create the reference comparison parameters.

    Air at 100 kPa / 300 K, rc = 12, rp = 1.7, cutoff 1.55,
    Atkinson peak temperature 1320 K.
    """
    return CycleParameters(heat_rejection=heat_rejection)
