from pydantic import BaseModel, Field
from typing import List, Optional


class PlayStateModel(BaseModel):
    player: int = Field(alias="jogador")
    bone: Optional[str] = Field(default=None, alias="pedra")  # no bone for a pass
    side: Optional[str] = Field(default=None, alias="lado")

    class Config:
        populate_by_name = True


class GameStateModel(BaseModel):
    player: int = Field(alias="jogador")
    hand: List[str] = Field(alias="mao")
    table: List[str] = Field(default_factory=list, alias="mesa")
    plays: List[PlayStateModel] = Field(default_factory=list, alias="jogadas")

    class Config:
        populate_by_name = True


class PlayResponseModel(BaseModel):
    player: int = Field(alias="jogador")
    bone: Optional[str] = Field(default=None, alias="pedra")
    side: Optional[str] = Field(default=None, alias="lado")

    class Config:
        populate_by_name = True


class ErrorModel(BaseModel):
    error: str
    status: str
    code: int
