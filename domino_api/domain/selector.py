"""Move selection policy.

Candidates are ranked by, in order:
1. the bone's pip sum, heaviest first, so heavy bones leave the hand early;
2. doubles before other bones, since a double only ever fits one value;
3. how many of the remaining bones match the value(s) the placement leaves open;
4. the bone's canonical pair, then the side (left, right, start), lowest first.

The last key makes the order total, so the same input always picks the same move.
"""

from dataclasses import dataclass
from typing import Sequence

from domino_api.domain.bone import Bone, Side
from domino_api.domain.errors import InternalEngineError
from domino_api.domain.layout import OpenEnds
from domino_api.domain.moves import Candidate, find_legal_moves

SIDE_ORDER = {Side.LEFT: 0, Side.RIGHT: 1, Side.START: 2}


@dataclass(frozen=True)
class Play:
    player: int
    bone: Bone
    side: Side
    reversed: bool
    end: int | None


@dataclass(frozen=True)
class Pass:
    player: int


Result = Play | Pass


def follow_up_count(candidate: Candidate, hand: Sequence[Bone]) -> int:
    """Count the bones left in hand that could be played on what this placement exposes."""
    exposed = candidate.exposes
    return sum(
        1
        for bone in hand
        if bone != candidate.bone and any(bone.contains(value) for value in exposed)
    )


def ranking_key(candidate: Candidate, hand: Sequence[Bone]) -> tuple:
    return (
        -candidate.bone.pip_sum,
        0 if candidate.bone.is_double else 1,
        -follow_up_count(candidate, hand),
        candidate.bone.key,
        SIDE_ORDER[candidate.side],
    )


def select_move(player: int, hand: Sequence[Bone], ends: OpenEnds | None) -> Result:
    """Pick the move to make, or pass.

    Args:
        player (int): Position of the player to move
        hand (Sequence[Bone]): The player's bones
        ends (OpenEnds | None): Current open ends, None for an empty table

    Raises:
        InternalEngineError: The chosen candidate is not a legal placement

    Returns:
        Result: Play with the chosen bone and side, or Pass when nothing fits
    """
    candidates = find_legal_moves(hand, ends)
    if not candidates:
        return Pass(player=player)

    best = min(candidates, key=lambda candidate: ranking_key(candidate, hand))

    if best.bone not in hand:
        raise InternalEngineError(f"Selected bone {best.bone!r} is not in the hand")
    if ends is not None and (best.end != ends.value(best.side) or not best.bone.contains(best.end)):
        raise InternalEngineError(f"Selected bone {best.bone!r} does not match the {best.side.name} end")

    return Play(
        player=player,
        bone=best.bone,
        side=best.side,
        reversed=best.reversed,
        end=best.end,
    )
