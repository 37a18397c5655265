"""Shape catalog: polyominoes parsed from ASCII masks.

A mask is a block of text where every non-whitespace character marks a
filled cell. Column index becomes x and line index becomes y, so the first
character of the first line is offset (0, 0).
"""

from __future__ import annotations

from dataclasses import dataclass

from kluring.domain.cell import Cell

SHAPE_MASKS: tuple[tuple[str, ...], ...] = (
    (
        "X",
        "X",
        "X",
        "XX",
        "X",
        "XX",
    ),
    (
        " XXX",
        "XX",
        " XX",
        "  X",
    ),
    (
        " XXX",
        "XX",
        "X",
        "XX",
    ),
    (
        " X",
        "XXXX",
        " X",
        " X",
        " X",
    ),
    (
        "XXX",
        "  X",
        "  XXX",
        "  X",
    ),
    (
        "  X",
        "XXX",
        " XXX",
        "  X",
    ),
)
"""Hand-authored masks; position in this tuple is the shape id."""


@dataclass(frozen=True)
class Shape:
    """An immutable footprint of cell offsets relative to a local origin."""

    shape_id: int
    offsets: tuple[Cell, ...]
    width: int
    height: int

    @classmethod
    def from_mask(cls, shape_id: int, mask: str) -> Shape:
        """Parse an ASCII mask into a shape.

        Raises ``ValueError`` when the mask has no filled cells.
        """
        offsets: list[Cell] = []
        width = 0
        lines = mask.splitlines()
        for y, line in enumerate(lines):
            for x, char in enumerate(line):
                if not char.isspace():
                    offsets.append(Cell(x, y))
            width = max(width, len(line))
        if not offsets:
            raise ValueError(f"shape {shape_id} mask has no filled cells")
        return cls(shape_id=shape_id, offsets=tuple(offsets), width=width, height=len(lines))

    def __len__(self) -> int:
        return len(self.offsets)


def load_catalog(masks: tuple[tuple[str, ...], ...] = SHAPE_MASKS) -> tuple[Shape, ...]:
    """Build the catalog; each shape's id is its position in ``masks``."""
    return tuple(Shape.from_mask(i, "\n".join(lines)) for i, lines in enumerate(masks))
