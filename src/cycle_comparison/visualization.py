"""
Visualization Module
Overlays the compared cycles on a single P-V diagram.

Date: 15-10-2026
"""

import matplotlib.pyplot as plt
from typing import Dict, Optional, Tuple

from .cycle_config import CycleType
from .cycles import CycleStates
from .process_curves import CycleTrace


# (line format, marker format) per cycle
CYCLE_STYLES: Dict[CycleType, Tuple[str, str]] = {
    CycleType.DUAL: ("b-", "bo"),
    CycleType.OTTO: ("r--", "ro"),
    CycleType.DIESEL: ("g-.", "go"),
    CycleType.ATKINSON: ("m:", "mo"),
}


class CyclePlotter:
    """
    Creates the P-V comparison chart of the air-standard cycles.

    Fixed linear viewport, one trace per cycle, filled markers on the
    state points.
    """

    def __init__(
        self,
        volume_limits: Tuple[float, float] = (0.0, 1.1),
        pressure_limits: Tuple[float, float] = (0.0, 6000.0),
    ):
        """
        Initialize plotter with the chart viewport.

        Args:
            volume_limits: x-axis range [m³/kg]
            pressure_limits: y-axis range [kPa]
        """
        self.volume_limits = volume_limits
        self.pressure_limits = pressure_limits
        self.fig_size = (9, 6.5)
        self.dpi = 300

    def plot_cycle_comparison(
        self,
        traces: Dict[CycleType, CycleTrace],
        cycles: Dict[CycleType, CycleStates],
        compression_ratio: float,
        save_path: Optional[str] = None,
        show: bool = False,
    ):
        """
        Create the overlaid P-V diagram.

        Args:
            traces: Sampled closed trace per cycle
            cycles: State points per cycle (markers)
            compression_ratio: Shown in the title
            save_path: Optional path to save the PNG
            show: Display the figure interactively

        Returns:
            The matplotlib Figure (closed unless shown)
        """
        fig, ax = plt.subplots(figsize=self.fig_size)

        for cycle_type, trace in traces.items():
            line_fmt, _ = CYCLE_STYLES[cycle_type]
            ax.plot(
                trace.volume, trace.pressure, line_fmt, linewidth=2, label=trace.label
            )

        # Mark state points (kept out of the legend)
        for cycle_type, cycle in cycles.items():
            _, marker_fmt = CYCLE_STYLES[cycle_type]
            ax.plot(
                [s.volume for s in cycle.states],
                [s.pressure for s in cycle.states],
                marker_fmt,
                markersize=6,
                markerfacecolor=marker_fmt[0],
                label="_nolegend_",
            )

        ax.set_xlabel("Volume (m³/kg)", fontsize=12, fontweight="bold")
        ax.set_ylabel("Pressure (kPa)", fontsize=12, fontweight="bold")
        ax.set_title(
            f"P-V Diagram Comparison ($r_c$={compression_ratio:g})",
            fontsize=14,
            fontweight="bold",
        )
        ax.legend(loc="upper right", fontsize=10)
        ax.grid(True, alpha=0.3)
        ax.set_xlim(*self.volume_limits)
        ax.set_ylim(*self.pressure_limits)

        plt.tight_layout()

        if save_path:
            fig.savefig(save_path, dpi=self.dpi)
            print(f"P-V comparison saved to {save_path}")

        if show:
            plt.show()
        else:
            plt.close(fig)

        return fig
