"""Per-request game state, rebuilt from scratch from the client's view of the round.

Nothing here outlives a request: the hand, the table and the history are
validated together and handed to the selector once.
"""

from dataclasses import dataclass
from typing import Sequence

from domino_api.domain.bone import Bone, Side
from domino_api.domain.errors import MalformedInput
from domino_api.domain.layout import LayoutGraph, OpenEnds, replay_open_ends


@dataclass(frozen=True)
class PlayRecord:
    player: int
    bone: Bone | None  # None for a pass
    side: Side = Side.LEFT

    @property
    def is_pass(self) -> bool:
        return self.bone is None


@dataclass(frozen=True)
class GameState:
    player: int
    hand: tuple[Bone, ...]
    table: LayoutGraph
    plays: tuple[PlayRecord, ...] = ()

    @property
    def played_bones(self) -> list[tuple[Bone, Side]]:
        return [(play.bone, play.side) for play in self.plays if not play.is_pass]

    def open_ends(self) -> OpenEnds | None:
        """Open ends of the table, ordered left/right.

        The history, when it holds any bone, fixes which end is left and which
        is right. Without history the ends come from the table alone.
        """
        history = self.played_bones
        if not history:
            return self.table.open_ends()

        replayed = replay_open_ends(history)
        # A closed loop is only resolvable from the history.
        if not self.table.is_closed_loop():
            self.table.open_ends()
        return replayed


def _check_unique(bones: Sequence[Bone], where: str) -> None:
    seen: set[Bone] = set()
    for bone in bones:
        if bone in seen:
            raise MalformedInput(f"Bone {bone!r} appears more than once in the {where}")
        seen.add(bone)


def assemble(
    player: int,
    hand: Sequence[Bone],
    table: Sequence[Bone] = (),
    plays: Sequence[PlayRecord] = (),
) -> GameState:
    """Validate the raw pieces of a request and build the game state.

    Args:
        player (int): Position of the player to move
        hand (Sequence[Bone]): The player's bones
        table (Sequence[Bone]): Bones already played, in any order
        plays (Sequence[PlayRecord]): Plays of the round, in order

    Raises:
        MalformedInput: Empty hand, negative player, or a bone repeated or in two places
        InvalidLayout: The table's bones do not form a single chain

    Returns:
        GameState: Validated state
    """
    if isinstance(player, bool) or not isinstance(player, int) or player < 0:
        raise MalformedInput(f"Player position must be a non-negative integer, got {player!r}")
    if not hand:
        raise MalformedInput("Hand must hold at least one bone")

    _check_unique(hand, "hand")
    _check_unique(table, "table")
    history = [play.bone for play in plays if play.bone is not None]
    _check_unique(history, "play history")

    on_table = set(table)
    held_and_played = [bone for bone in hand if bone in on_table]
    if held_and_played:
        raise MalformedInput(f"Bones {held_and_played!r} are both in hand and on the table")

    if history:
        missing = [bone for bone in history if bone not in on_table]
        if missing:
            raise MalformedInput(f"Played bones {missing!r} are not on the table")
        if len(history) != len(on_table):
            raise MalformedInput("Table holds bones that are missing from the play history")

    graph = LayoutGraph.from_bones(table)
    state = GameState(player=player, hand=tuple(hand), table=graph, plays=tuple(plays))
    # Layout errors surface during assembly.
    state.open_ends()
    return state
