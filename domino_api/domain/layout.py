"""Layout of played bones as a graph over pip values.

Every played bone is one undirected edge between its two pip values; a double
is a self-loop. The bones on a table always form a single open trail, so the
chain's two open ends are exactly the vertices of odd incidence, and they can be
read off the unordered set of bones without knowing the order of play.
"""

from typing import Iterable, NamedTuple

import numpy as np

from domino_api.domain.bone import PIP_VALUES, Bone, Side
from domino_api.domain.errors import InvalidLayout, MalformedInput


class OpenEnds(NamedTuple):
    left: int
    right: int

    def value(self, side: Side) -> int:
        if side is Side.LEFT:
            return self.left
        if side is Side.RIGHT:
            return self.right
        raise ValueError(f"An open layout has no {side.name} end")


class LayoutGraph:
    def __init__(self):
        self.adjacency: dict[int, set[int]] = {}
        self._bones: list[Bone] = []

    @classmethod
    def from_bones(cls, bones: Iterable[Bone]) -> "LayoutGraph":
        graph = cls()
        for bone in bones:
            graph.add(bone)
        return graph

    def add(self, bone: Bone) -> None:
        """Add a played bone as an edge.

        Raises:
            MalformedInput: The same bone is already on the table
        """
        if bone.y in self.adjacency.get(bone.x, ()):
            raise MalformedInput(f"Bone {bone!r} appears more than once on the table")
        self.adjacency.setdefault(bone.x, set()).add(bone.y)
        self.adjacency.setdefault(bone.y, set()).add(bone.x)
        self._bones.append(bone)

    @property
    def bones(self) -> tuple[Bone, ...]:
        return tuple(self._bones)

    def __len__(self) -> int:
        return len(self._bones)

    def __contains__(self, bone: Bone) -> bool:
        return bone.y in self.adjacency.get(bone.x, ())

    def incidence(self) -> np.ndarray:
        """Number of edge ends touching each pip value; a self-loop counts twice."""
        counts = np.zeros(PIP_VALUES, dtype=np.int64)
        for vertex, neighbours in self.adjacency.items():
            counts[vertex] = len(neighbours) + (1 if vertex in neighbours else 0)
        return counts

    def is_connected(self) -> bool:
        if not self.adjacency:
            return True
        start = next(iter(self.adjacency))
        seen = {start}
        stack = [start]
        while stack:
            for neighbour in self.adjacency[stack.pop()]:
                if neighbour not in seen:
                    seen.add(neighbour)
                    stack.append(neighbour)
        return len(seen) == len(self.adjacency)

    def is_closed_loop(self) -> bool:
        """True when the bones join end to end into a ring with no odd pip value."""
        incidence = self.incidence()
        return (
            self.is_connected()
            and not np.any(incidence % 2)
            and np.count_nonzero(incidence) > 1
        )

    def open_ends(self) -> OpenEnds | None:
        """Derive the chain's two open ends from the parity of each pip value.

        Raises:
            InvalidLayout: The bones cannot form one open chain, or they close
                into a loop whose shared end value is not determined by the bones alone

        Returns:
            OpenEnds | None: Ends ordered (low, high), or None for an empty table
        """
        if not self.adjacency:
            return None
        if not self.is_connected():
            raise InvalidLayout("Table bones do not form a single connected chain")

        incidence = self.incidence()
        odd = np.flatnonzero(incidence % 2).tolist()
        if len(odd) == 2:
            return OpenEnds(odd[0], odd[1])
        if len(odd) > 2:
            raise InvalidLayout(
                f"Table has {len(odd)} pip values with an odd number of bone ends: {odd}"
            )

        touched = np.flatnonzero(incidence).tolist()
        if len(touched) == 1:
            # Only a double has been played: both ends show its value.
            return OpenEnds(touched[0], touched[0])
        raise InvalidLayout(
            "Table bones close into a loop; the open end cannot be told from the table alone"
        )


def replay_open_ends(plays: Iterable[tuple[Bone, Side]]) -> OpenEnds | None:
    """Rebuild the ordered open ends by replaying plays in order.

    Each bone is attached on the side its play names when that end matches,
    and on the other side otherwise.

    Args:
        plays (Iterable[tuple[Bone, Side]]): Played bones with the side they were laid on

    Raises:
        InvalidLayout: A bone in the history matches neither open end

    Returns:
        OpenEnds | None: (left, right) after the last play, or None if nothing was played
    """
    ends: list[int] | None = None
    for bone, side in plays:
        if ends is None:
            ends = [bone.x, bone.y]
            continue
        order = (1, 0) if side is Side.RIGHT else (0, 1)
        for index in order:
            if bone.contains(ends[index]):
                ends[index] = bone.other(ends[index])
                break
        else:
            raise InvalidLayout(
                f"Bone {bone!r} in the play history matches neither open end {tuple(ends)}"
            )
    if ends is None:
        return None
    return OpenEnds(ends[0], ends[1])
