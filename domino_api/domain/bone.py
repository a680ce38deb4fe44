"""Bones (domino tiles) and their Unicode glyph encoding.

Rule of thumb:
- A bone is identified by its unordered pair of pips: (2, 5) and (5, 2) are the same bone.
- The written order is only kept so a glyph can be rendered the way it was received.
"""

from dataclasses import dataclass
from enum import Enum

from domino_api.domain.errors import MalformedInput

MAX_PIP = 6
PIP_VALUES = MAX_PIP + 1
UNIQUE_BONES = PIP_VALUES * (PIP_VALUES + 1) // 2

# U+1F031 is the horizontal 0-0 tile, U+1F063 the vertical 0-0 tile.
HORIZONTAL_BASE = ord("\U0001F031")
VERTICAL_BASE = ord("\U0001F063")
GLYPHS_PER_BLOCK = PIP_VALUES * PIP_VALUES


class BoneFormatError(MalformedInput):
    pass


class Side(str, Enum):
    LEFT = "esquerda"
    RIGHT = "direita"
    START = "inicio"  # first bone on an empty table

    @classmethod
    def from_label(cls, label: str | None) -> "Side":
        """Read a side label the way clients send it.

        Anything starting with "d" (direita) is the right end; every other label,
        including a missing one, is the left end.
        """
        if label and label.strip().lower().startswith("d"):
            return cls.RIGHT
        return cls.LEFT


@dataclass(frozen=True, eq=False)
class Bone:
    x: int
    y: int

    def __post_init__(self) -> None:
        for pip in (self.x, self.y):
            if isinstance(pip, bool) or not isinstance(pip, int) or not 0 <= pip <= MAX_PIP:
                raise MalformedInput(f"Invalid pip value {pip!r} in bone ({self.x}, {self.y})")

    @property
    def key(self) -> tuple[int, int]:
        """Canonical (low, high) pair used for identity and ordering."""
        return (self.x, self.y) if self.x <= self.y else (self.y, self.x)

    @property
    def is_double(self) -> bool:
        return self.x == self.y

    @property
    def pip_sum(self) -> int:
        return self.x + self.y

    def contains(self, pip: int) -> bool:
        return pip in (self.x, self.y)

    def other(self, pip: int) -> int:
        """Return the value opposite to ``pip``; for a double that is ``pip`` itself."""
        if pip == self.x:
            return self.y
        if pip == self.y:
            return self.x
        raise ValueError(f"{pip} is not on bone {self!r}")

    def reversed(self) -> "Bone":
        return Bone(self.y, self.x)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bone):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __repr__(self) -> str:
        return f"Bone({self.x}, {self.y})"

    def __str__(self) -> str:
        return format_bone(self)


@dataclass(frozen=True)
class PlayedBone:
    """A bone as laid on the table; ``reversed`` only affects how it is drawn."""

    bone: Bone
    reversed: bool = False

    @property
    def oriented(self) -> Bone:
        return self.bone.reversed() if self.reversed else self.bone


def format_bone(bone: Bone) -> str:
    """Render a bone as a single Unicode domino glyph.

    Doubles are drawn with the vertical block, everything else with the
    horizontal block, in the bone's written order.

    Args:
        bone (Bone): The bone to render

    Returns:
        str: One-character glyph
    """
    base = VERTICAL_BASE if bone.is_double else HORIZONTAL_BASE
    return chr(base + bone.x * PIP_VALUES + bone.y)


def parse_bone(text: str) -> Bone:
    """Parse a Unicode domino glyph (horizontal or vertical) into a bone.

    Args:
        text (str): A string holding exactly one domino glyph

    Raises:
        BoneFormatError: The text is not a single domino glyph

    Returns:
        Bone: The bone with pips in the glyph's written order
    """
    if not isinstance(text, str):
        raise BoneFormatError(f"Bone must be a string, got {type(text).__name__}")
    glyph = text.strip()
    if len(glyph) != 1:
        raise BoneFormatError(f"Bone must be a single domino glyph, got {text!r}")

    code_point = ord(glyph)
    for base in (HORIZONTAL_BASE, VERTICAL_BASE):
        offset = code_point - base
        if 0 <= offset < GLYPHS_PER_BLOCK:
            return Bone(*divmod(offset, PIP_VALUES))
    raise BoneFormatError(f"{text!r} is not a domino glyph")


def full_set() -> list[Bone]:
    """Return every unique bone of the double-six set, in canonical order."""
    return [Bone(x, y) for x in range(PIP_VALUES) for y in range(x, PIP_VALUES)]
