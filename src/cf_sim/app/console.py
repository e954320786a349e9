# app/console.py
import re
from collections.abc import Callable
from datetime import datetime

from cf_sim.domain.entities.geography import Point
from cf_sim.domain.errors import InputFormatError
from cf_sim.domain.grid import Grid, Ranked
from cf_sim.sim.hooks import GridHooks, NoopHooks

_INT = re.compile(r"[+-]?[0-9]+")

FORMAT_HINT = (
    "Invalid format. Enter an integer value for X and an integer value for Y, "
    "separated by a comma (e.g. 3,-8)"
)


def parse_point(line: str, exit_word: str = "done") -> Point | None:
    """Parse `x,y`; spaces anywhere are ignored. Returns None for the exit word."""
    s = line.replace(" ", "").strip().lower()
    if s == exit_word.lower():
        return None
    parts = s.split(",")
    if len(parts) != 2:
        raise InputFormatError(f"expected 2 comma-separated values, got {len(parts)}")
    bad = [p for p in parts if not _INT.fullmatch(p)]
    if bad:
        raise InputFormatError(f"not an integer: {bad[0]!r}")
    return Point(int(parts[0]), int(parts[1]))


def time_of_day(now: datetime) -> str:
    return "morning" if now.hour < 12 else "afternoon" if now.hour < 18 else "evening"


def format_catalog(grid: Grid) -> list[str]:
    lines = []
    for node in grid.nodes:
        for f in node.facilities:
            prices = "   ".join(f"Medication {k.value}: ${p:.2f}" for k, p in f.prices.items())
            lines.append(f"Central Fill Facility {f.id}, at ({node.x},{node.y}):\t{prices}")
    return lines


def format_results(query: Point, results: list[Ranked]) -> list[str]:
    lines = [f"The {len(results)} closest central fill facilities to ({query.x},{query.y}):"]
    for r in results:
        for f in r.node.facilities:
            kind, price = f.cheapest()
            lines.append(
                f"Central Fill {f.id} - ${price:.2f}, "
                f"Medication {kind.value}, Distance {r.distance}"
            )
    return lines


class Session:
    """Blocking read-query-print loop over a built grid."""

    def __init__(
        self,
        grid: Grid,
        *,
        closest: int = 3,
        exit_word: str = "done",
        read: Callable[[str], str] | None = None,
        write: Callable[[str], None] = print,
        hooks: GridHooks | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.grid, self.closest, self.exit_word = grid, closest, exit_word
        self.read, self.write, self.clock = read or input, write, clock
        self.hooks = hooks or NoopHooks()
        self.answered = 0

    @property
    def prompt(self) -> str:
        return f"Please input your coordinates. To exit the program, enter '{self.exit_word}': "

    def greet(self) -> None:
        self.write(
            f"Good {time_of_day(self.clock())}! "
            "Let's figure out what your closest central fill facilities are..."
        )
        self.write("")

    def show_catalog(self) -> None:
        for line in format_catalog(self.grid):
            self.write(line)
        self.write("")

    def show_map(self) -> None:
        self.write("Central Fills Stations:")
        for node in self.grid.nodes:
            self.write(f"X: {node.x}\tY: {node.y}")
        self.write("")
        self.write("Node Map:")
        self.write(self.grid.render())
        self.write("")

    def read_point(self) -> Point | None:
        while True:
            try:
                line = self.read(self.prompt)
            except EOFError:
                return None
            try:
                p = parse_point(line, self.exit_word)
            except InputFormatError as e:
                self.hooks.input_rejected(line=line, reason=str(e))
                self.write(FORMAT_HINT)
                continue
            if p is None:
                self.write("Exiting...")
                return None
            return self.grid.clamp(p)

    def answer(self, p: Point) -> list[Ranked]:
        results = self.grid.find_closest(p, self.closest)
        for line in format_results(p, results):
            self.write(line)
        self.write("")
        self.answered += 1
        return results

    def run(self, *, catalog: bool = True, node_map: bool = False) -> int:
        self.greet()
        if catalog:
            self.show_catalog()
        if node_map:
            self.show_map()
        while True:
            p = self.read_point()
            if p is None:
                break
            self.answer(p)
        return self.answered
