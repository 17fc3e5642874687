"""Plain-text console dump of the tile grid."""

import sys
from typing import List, Sequence, TextIO, TYPE_CHECKING

if TYPE_CHECKING:
    from ..model.state import GenerationState


TITLE = "--- CELLULAR AUTOMATA AND DRUNK AGENT SIMULATION ---"
MAP_HEADER = "--- Current Map ---"
MAP_FOOTER = "-------------------"
FINISHED = "--- Simulation Finished ---"


def format_grid(rows: Sequence[Sequence[int]]) -> str:
    """Render rows of 0/1 values between header and footer banners."""
    lines: List[str] = [MAP_HEADER]
    lines.extend(" ".join(str(int(cell)) for cell in row) for row in rows)
    lines.append(MAP_FOOTER)
    return "\n".join(lines)


class ConsolePrinter:
    """Writes the grid after seeding and after every iteration."""

    def __init__(self, stream: TextIO = None, quiet: bool = False):
        self.stream = stream if stream is not None else sys.stdout
        self.quiet = quiet

    def _write(self, text: str) -> None:
        if not self.quiet:
            print(text, file=self.stream)

    def title(self) -> None:
        self._write(TITLE)

    def initial(self, state: "GenerationState") -> None:
        self._write("\nInitial map state:")
        self._write(format_grid(state.to_rows()))

    def iteration(self, state: "GenerationState") -> None:
        self._write(f"\n--- Iteration {state.iteration} ---")
        self._write(format_grid(state.to_rows()))

    def finished(self) -> None:
        self._write(f"\n{FINISHED}")
