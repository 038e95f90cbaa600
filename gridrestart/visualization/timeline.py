"""Recovery timeline visualizer for blackout simulations.

Generates plots for:
- Generation mix by class against expected demand
- Weighted stability against the stability threshold
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.figure import Figure

from gridrestart.metrics.kpi import generation_matrix

if TYPE_CHECKING:
    from gridrestart.domain.models import MinuteResult, SimulationResult


@dataclass
class TimelinePlotConfig:
    """Configuration for timeline plots.

    Attributes:
        figsize: Figure size (width, height) in inches.
        dpi: Dots per inch for figure resolution.
        colors: Color per generation class label.
        default_color: Color for classes missing from ``colors``.
        demand_color: Color of the demand line.
        stability_color: Color of the stability line.
        threshold_color: Color of the stability threshold line.
        title_fontsize: Font size for plot titles.
        label_fontsize: Font size for axis labels.
        legend_fontsize: Font size for legend.
        grid_alpha: Alpha value for grid lines.
    """

    figsize: tuple[float, float] = (14, 9)
    dpi: int = 100
    colors: dict[str, str] = field(
        default_factory=lambda: {
            "Hydroelectric": "#2980b9",
            "Wind": "#1abc9c",
            "Geothermal": "#d35400",
            "Solar": "#f1c40f",
            "Nuclear": "#8e44ad",
            "Combined cycle": "#7f8c8d",
            "Coal": "#34495e",
            "Fuel gas": "#e67e22",
            "Biomass": "#27ae60",
        }
    )
    default_color: str = "#bdc3c7"
    demand_color: str = "#c0392b"
    stability_color: str = "#2c3e50"
    threshold_color: str = "#e74c3c"
    title_fontsize: int = 14
    label_fontsize: int = 12
    legend_fontsize: int = 9
    grid_alpha: float = 0.3


class RecoveryTimelineVisualizer:
    """Visualizer for blackout recovery timelines.

    Example:
        ```python
        visualizer = RecoveryTimelineVisualizer()
        fig = visualizer.plot_dashboard(result, title="Recovery from 08:00")
        fig.savefig("recovery.png")
        ```
    """

    def __init__(self, config: TimelinePlotConfig | None = None) -> None:
        """Initialize the timeline visualizer.

        Args:
            config: Plot configuration options.
        """
        self.config = config or TimelinePlotConfig()

    def plot_generation_mix(
        self,
        results: list[MinuteResult],
        ax: plt.Axes | None = None,
        show_legend: bool = True,
    ) -> plt.Axes:
        """Plot stacked generation per class with the demand curve on top.

        Args:
            results: Per-minute simulation results.
            ax: Matplotlib axes to plot on (creates new if None).
            show_legend: Whether to show the legend.

        Returns:
            Matplotlib axes with the plot.
        """
        if ax is None:
            _, ax = plt.subplots(figsize=(12, 6))

        minutes = np.array([r.minute for r in results])
        demand = np.array([r.expected_demand_mw for r in results])
        labels, matrix = generation_matrix(results)

        if labels:
            ax.stackplot(
                minutes,
                matrix,
                labels=labels,
                colors=[
                    self.config.colors.get(label, self.config.default_color)
                    for label in labels
                ],
                alpha=0.8,
            )

        ax.plot(
            minutes,
            demand,
            color=self.config.demand_color,
            linewidth=2,
            linestyle="--",
            label="Expected Demand",
        )

        ax.set_xlabel("Minutes since blackout", fontsize=self.config.label_fontsize)
        ax.set_ylabel("Power (MW)", fontsize=self.config.label_fontsize)
        ax.set_title("Generation Mix vs Demand", fontsize=self.config.title_fontsize)
        if len(minutes) > 1:
            ax.set_xlim(minutes[0], minutes[-1])
        ax.set_ylim(0, max(demand.max() if demand.size else 0, 1.0) * 1.1)
        ax.grid(True, alpha=self.config.grid_alpha)

        if show_legend:
            ax.legend(loc="upper left", fontsize=self.config.legend_fontsize)

        return ax

    def plot_stability(
        self,
        results: list[MinuteResult],
        threshold: float = 0.7,
        ax: plt.Axes | None = None,
        show_legend: bool = True,
    ) -> plt.Axes:
        """Plot weighted stability over time with the threshold line.

        Args:
            results: Per-minute simulation results.
            threshold: Stability threshold reference line.
            ax: Matplotlib axes to plot on (creates new if None).
            show_legend: Whether to show the legend.

        Returns:
            Matplotlib axes with the plot.
        """
        if ax is None:
            _, ax = plt.subplots(figsize=(12, 4))

        minutes = [r.minute for r in results]
        stability = [r.average_stability for r in results]

        ax.plot(
            minutes,
            stability,
            color=self.config.stability_color,
            linewidth=1.5,
            label="Weighted Stability",
        )
        ax.axhline(
            y=threshold,
            color=self.config.threshold_color,
            linestyle="--",
            linewidth=1.5,
            label=f"Threshold ({threshold:.1f})",
        )

        ax.set_xlabel("Minutes since blackout", fontsize=self.config.label_fontsize)
        ax.set_ylabel("Stability", fontsize=self.config.label_fontsize)
        ax.set_title("Grid Stability", fontsize=self.config.title_fontsize)
        ax.set_ylim(0, 1.05)
        ax.grid(True, alpha=self.config.grid_alpha)

        if show_legend:
            ax.legend(loc="lower right", fontsize=self.config.legend_fontsize)

        return ax

    def plot_dashboard(
        self,
        result: SimulationResult,
        title: str = "Blackout Recovery",
        save_path: str | Path | None = None,
    ) -> Figure:
        """Plot generation mix and stability panels for a full run.

        Args:
            result: Simulation result to plot.
            title: Figure title.
            save_path: Path to save the figure.

        Returns:
            Matplotlib Figure object.
        """
        fig, axes = plt.subplots(
            2,
            1,
            figsize=self.config.figsize,
            sharex=True,
            gridspec_kw={"height_ratios": [3, 1]},
        )

        self.plot_generation_mix(result.minutes, ax=axes[0])
        self.plot_stability(result.minutes, ax=axes[1])

        fig.suptitle(title, fontsize=self.config.title_fontsize + 2, fontweight="bold")
        plt.tight_layout()

        if save_path:
            fig.savefig(save_path, dpi=self.config.dpi, bbox_inches="tight")

        return fig


def create_recovery_timeline(
    result: SimulationResult,
    title: str = "Blackout Recovery",
    save_path: str | Path | None = None,
) -> Figure:
    """Convenience function to create a recovery dashboard.

    Args:
        result: Simulation result to plot.
        title: Title for the visualization.
        save_path: Path to save the figure.

    Returns:
        Matplotlib Figure object.
    """
    visualizer = RecoveryTimelineVisualizer()
    return visualizer.plot_dashboard(result, title=title, save_path=save_path)
