"""Summary report generation for the cave generator."""

from typing import List, Dict, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ..model.state import GenerationState


class Reporter:
    """Generates summary statistics and formatted text report."""

    def __init__(self, config_source: str, seed: Optional[int]):
        self.config_source = config_source
        self.seed = seed
        self.step_metrics: List[Dict] = []
        self.peak_active_ratio = 0.0
        self.lowest_active_ratio = 1.0

    def update(self, state: "GenerationState") -> None:
        """Accumulate metrics per iteration."""
        self.step_metrics.append(dict(state.metrics))

        ratio = state.metrics.get('active_ratio', 0.0)
        self.peak_active_ratio = max(self.peak_active_ratio, ratio)
        self.lowest_active_ratio = min(self.lowest_active_ratio, ratio)

    def generate_summary(self, final_state: "GenerationState") -> str:
        """Returns formatted text report."""
        metrics = final_state.metrics
        height, width = final_state.cells.shape
        active_ratio = metrics.get('active_ratio', 0.0)

        lines = [
            "",
            "=" * 80,
            "                 CELLULAR AUTOMATA + DRUNK AGENT REPORT",
            "=" * 80,
            f"Configuration: {self.config_source}",
            f"Random Seed: {self.seed if self.seed is not None else 'None (random)'}",
            "",
            "GENERATION METRICS",
            "-" * 40,
            f"Iterations:            {final_state.iteration}",
            f"Grid Size:             {height} rows x {width} cols",
            f"Final Active Ratio:    {active_ratio:.4f}",
            f"Peak Active Ratio:     {self.peak_active_ratio:.4f}",
            f"Lowest Active Ratio:   {self.lowest_active_ratio:.4f}",
            f"Rooms Stamped:         {int(metrics.get('rooms_stamped', 0))}",
            f"Agent Steps:           {int(metrics.get('steps_taken', 0))}",
            f"Final Agent Position:  ({final_state.agent.x}, {final_state.agent.y})",
            "=" * 80,
        ]
        return "\n".join(lines)
