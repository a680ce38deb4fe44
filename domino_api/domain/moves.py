"""Enumeration of legal placements for a hand against the open ends."""

from dataclasses import dataclass
from typing import Iterable

from domino_api.domain.bone import Bone, PlayedBone, Side
from domino_api.domain.layout import OpenEnds


@dataclass(frozen=True)
class Candidate:
    bone: Bone
    side: Side
    end: int | None  # value of the end being extended, None on an empty table
    reversed: bool = False

    @property
    def played(self) -> PlayedBone:
        return PlayedBone(self.bone, self.reversed)

    @property
    def exposes(self) -> tuple[int, ...]:
        """Pip values left open by this placement."""
        if self.end is None:
            return (self.bone.x,) if self.bone.is_double else (self.bone.x, self.bone.y)
        return (self.bone.other(self.end),)


def _placement(bone: Bone, side: Side, end: int) -> Candidate:
    # On the left end the bone's right pip touches the chain, on the right end its left pip.
    touching = bone.y if side is Side.LEFT else bone.x
    return Candidate(bone=bone, side=side, end=end, reversed=touching != end)


def find_legal_moves(hand: Iterable[Bone], ends: OpenEnds | None) -> list[Candidate]:
    """List every legal placement of the hand's bones.

    Args:
        hand (Iterable[Bone]): Bones held by the player
        ends (OpenEnds | None): Current open ends, None when the table is empty

    Returns:
        list[Candidate]: One candidate per (bone, end) pairing, in hand order.
            Empty when nothing can be played.
    """
    candidates: list[Candidate] = []
    for bone in hand:
        if ends is None:
            candidates.append(Candidate(bone=bone, side=Side.START, end=None))
            continue
        for side, end in ((Side.LEFT, ends.left), (Side.RIGHT, ends.right)):
            if bone.contains(end):
                candidates.append(_placement(bone, side, end))
    return candidates
