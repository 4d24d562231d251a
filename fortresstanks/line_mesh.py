"""Vector line meshes stored as text files of line segments."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from pathlib import Path

import pygame

from .drawing import draw_line
from .geometry import Vector

Point = tuple[int, int]
Line = tuple[Point, Point]

_LINE_PATTERN = re.compile(
    r"\(\s*([+-]?\d+),\s*([+-]?\d+)\)->\(\s*([+-]?\d+),\s*([+-]?\d+)\)"
)


def format_line(start: Point, end: Point) -> str:
    """Format a segment as ``(x1,y1)->(x2,y2)``."""
    return f"({start[0]},{start[1]})->({end[0]},{end[1]})"


def parse_line(text: str) -> Line:
    """Parse a segment written by :func:`format_line`."""
    match = _LINE_PATTERN.match(text)
    if match is None:
        raise ValueError(f"malformed line segment: {text!r}")
    x1, y1, x2, y2 = (int(group) for group in match.groups())
    return (x1, y1), (x2, y2)


def _half(value: int) -> int:
    """Halve an integer, truncating toward zero."""
    return value // 2 if value >= 0 else -(-value // 2)


def _bounds(lines: list[Line]) -> tuple[int, int, int, int] | None:
    if not lines:
        return None
    xs = [point[0] for line in lines for point in line]
    ys = [point[1] for line in lines for point in line]
    return min(xs), max(xs), min(ys), max(ys)


@dataclass
class LineMesh:
    """A set of line segments with the extent of the loaded shape."""

    lines: list[Line] = field(default_factory=list)
    width: int = 0
    height: int = 0

    def save(self, path: str | os.PathLike) -> None:
        """Write the segments, centred on the middle of their bounding box."""
        bounds = _bounds(self.lines)
        if bounds is None:
            mid_x = mid_y = 0
        else:
            min_x, max_x, min_y, max_y = bounds
            mid_x = _half(max_x + min_x)
            mid_y = _half(max_y + min_y)

        with open(path, "w", encoding="utf-8") as file:
            file.write(f"{len(self.lines)}\n")
            for (x1, y1), (x2, y2) in self.lines:
                file.write(
                    format_line((x1 - mid_x, y1 - mid_y), (x2 - mid_x, y2 - mid_y)) + "\n"
                )

    def load(self, path: str | os.PathLike) -> None:
        """Read segments from a file and recompute width and height."""
        tokens = Path(path).read_text(encoding="utf-8").split()
        if not tokens:
            raise ValueError(f"empty line mesh file: {path}")
        count = max(int(tokens[0]), 0)
        entries = tokens[1 : 1 + count]
        if len(entries) < count:
            raise ValueError(
                f"line mesh file {path} declares {count} lines but holds {len(entries)}"
            )

        self.lines = [parse_line(entry) for entry in entries]

        bounds = _bounds(self.lines)
        if bounds is None:
            self.width = self.height = 0
        else:
            min_x, max_x, min_y, max_y = bounds
            self.width = max_x - min_x
            self.height = max_y - min_y

    def render(
        self,
        surface: pygame.Surface,
        pos: Vector,
        ratio_x: float = 1.0,
        ratio_y: float = 1.0,
    ) -> None:
        """Draw every segment offset by pos and scaled by the given ratios."""
        for (x1, y1), (x2, y2) in self.lines:
            start = Vector(pos.x + x1 * ratio_x, pos.y + y1 * ratio_y)
            end = Vector(pos.x + x2 * ratio_x, pos.y + y2 * ratio_y)
            draw_line(surface, start, end)