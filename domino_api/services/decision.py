from domino_api.domain.game_state import GameState
from domino_api.domain.selector import Result, select_move


def decide(state: GameState) -> Result:
    """Choose the move for the player described by ``state``.

    This is intentionally kept outside the HTTP router module and holds no state
    between calls.
    """
    ends = state.open_ends()
    return select_move(state.player, state.hand, ends)
