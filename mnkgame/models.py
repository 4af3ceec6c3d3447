"""Pydantic models for WebSocket message protocol."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, ValidationError, model_validator

from mnkgame.config import settings
from mnkgame.game import MIN_BOARD_SIZE, MIN_MARKS_TO_WIN


# ---------------------------------------------------------------------------
# Client → Server
# ---------------------------------------------------------------------------

class PlaceMarkMsg(BaseModel):
    type: Literal["place_mark"] = "place_mark"
    row: int
    col: int


class ResetMsg(BaseModel):
    type: Literal["reset"] = "reset"


class ConfigureMsg(BaseModel):
    type: Literal["configure"] = "configure"
    board_size: int = Field(ge=MIN_BOARD_SIZE)
    marks_to_win: int = Field(ge=MIN_MARKS_TO_WIN)

    @model_validator(mode="after")
    def check_limits(self) -> ConfigureMsg:
        if self.board_size > settings.max_board_size:
            raise ValueError(f"board_size must be at most {settings.max_board_size}")
        if self.marks_to_win > self.board_size:
            raise ValueError("marks_to_win cannot exceed board_size")
        return self


class SetPlayersMsg(BaseModel):
    type: Literal["set_players"] = "set_players"
    player_x: str | None = Field(default=None, max_length=40)
    player_o: str | None = Field(default=None, max_length=40)


ClientMessage = PlaceMarkMsg | ResetMsg | ConfigureMsg | SetPlayersMsg


# ---------------------------------------------------------------------------
# Server → Client
# ---------------------------------------------------------------------------

class PlayersInfo(BaseModel):
    X: str
    O: str


class StateMsg(BaseModel):
    type: Literal["state"] = "state"
    board: list[list[str | None]]
    board_size: int
    marks_to_win: int
    current_turn: str
    status: str  # "playing" | "won" | "draw"
    winner: str | None
    players: PlayersInfo
    message: str


class ErrorMsg(BaseModel):
    type: Literal["error"] = "error"
    message: str


def parse_client_message(data: dict) -> ClientMessage | ErrorMsg:
    """Parse a raw dict into a typed client message, or an ErrorMsg saying why not."""
    if not isinstance(data, dict):
        return ErrorMsg(message="Unknown or invalid message")
    msg_type = data.get("type")
    if not isinstance(msg_type, str):
        return ErrorMsg(message="Unknown or invalid message")
    mapping: dict[str, type[BaseModel]] = {
        "place_mark": PlaceMarkMsg,
        "reset": ResetMsg,
        "configure": ConfigureMsg,
        "set_players": SetPlayersMsg,
    }
    model = mapping.get(msg_type)  # type: ignore[arg-type]
    if model is None:
        return ErrorMsg(message="Unknown or invalid message")
    try:
        return model.model_validate(data)  # type: ignore[return-value]
    except ValidationError as exc:
        details = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" if err["loc"] else err["msg"]
            for err in exc.errors()
        )
        return ErrorMsg(message=f"Invalid '{msg_type}' message: {details}")
