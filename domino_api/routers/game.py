import logging

from fastapi import APIRouter

from domino_api.converter import DataConverter
from domino_api.models.dc_models import GameStateModel, PlayResponseModel
from domino_api.services.decision import decide

game_router = APIRouter()
data_converter = DataConverter()


class GameAPI:
    @staticmethod
    @game_router.post(
        "/",
        response_model=PlayResponseModel,
        response_model_by_alias=True,
        response_model_exclude_none=True,
    )
    @game_router.post(
        "/jogar",
        response_model=PlayResponseModel,
        response_model_by_alias=True,
        response_model_exclude_none=True,
    )
    def play(game_state: GameStateModel) -> PlayResponseModel:
        """Choose the next move for the player in the request

        Args:
            game_state (GameStateModel):
                    jogador: int
                    mao: List[str]
                    mesa: List[str]
                    jogadas: List[PlayStateModel]

        Returns:
            PlayResponseModel: The bone and side to play, or only the player for a pass
        """
        state = data_converter.convert_gamestatemodel_to_gamestate(game_state)
        result = decide(state)
        logging.info(f"player {state.player}: {result}")
        return data_converter.convert_result_to_playresponsemodel(result)
