from typing import List

from domino_api.domain.bone import Bone, PlayedBone, Side, format_bone, parse_bone
from domino_api.domain.game_state import GameState, PlayRecord, assemble
from domino_api.domain.selector import Pass, Play, Result
from domino_api.models.dc_models import GameStateModel, PlayResponseModel, PlayStateModel


class DataConverter:
    """This class is used to convert data between the transport models and the domain."""

    def convert_bones(self, bones: List[str]) -> List[Bone]:
        return [parse_bone(bone) for bone in bones]

    def convert_playstatemodel_to_playrecord(self, play: PlayStateModel) -> PlayRecord:
        """Convert one entry of the play history

        Args:
            play (PlayStateModel): A play as sent by the client; an empty bone is a pass

        Returns:
            PlayRecord: The play with a parsed bone and side
        """
        bone = parse_bone(play.bone) if play.bone else None
        return PlayRecord(player=play.player, bone=bone, side=Side.from_label(play.side))

    def convert_gamestatemodel_to_gamestate(self, game_state: GameStateModel) -> GameState:
        """Convert the request body to a validated GameState

        Args:
            game_state (GameStateModel): The request body

        Raises:
            MalformedInput: A bone could not be parsed or the pieces are inconsistent
            InvalidLayout: The table's bones do not form a single chain

        Returns:
            GameState: The state the engine decides on
        """
        return assemble(
            player=game_state.player,
            hand=self.convert_bones(game_state.hand),
            table=self.convert_bones(game_state.table),
            plays=[
                self.convert_playstatemodel_to_playrecord(play)
                for play in game_state.plays
            ],
        )

    def convert_result_to_playresponsemodel(self, result: Result) -> PlayResponseModel:
        """Convert the engine's decision to the response sent to the client

        Args:
            result (Result): Play or Pass

        Returns:
            PlayResponseModel: Player only for a pass; player, glyph and side for a play
        """
        if isinstance(result, Pass):
            return PlayResponseModel(player=result.player)
        if not isinstance(result, Play):
            raise TypeError(f"Unknown result type {type(result).__name__}")

        # The first bone of a round is reported on the left.
        side = Side.LEFT if result.side is Side.START else result.side
        oriented = PlayedBone(result.bone, result.reversed).oriented
        return PlayResponseModel(
            player=result.player,
            bone=format_bone(oriented),
            side=side.value,
        )
