"""Session management: one hot-seat game per connection."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from fastapi import WebSocket

from mnkgame import game
from mnkgame.config import settings
from mnkgame.game import GameState, Mark
from mnkgame.models import (
    ConfigureMsg,
    ErrorMsg,
    PlaceMarkMsg,
    PlayersInfo,
    ResetMsg,
    SetPlayersMsg,
    StateMsg,
    parse_client_message,
)

logger = logging.getLogger(__name__)

DEFAULT_NAMES: dict[Mark, str] = {"X": "Player 1", "O": "Player 2"}


@dataclass
class Players:
    x: str = DEFAULT_NAMES["X"]
    o: str = DEFAULT_NAMES["O"]

    def name_for(self, mark: Mark) -> str:
        return self.x if mark == "X" else self.o

    def rename(self, mark: Mark, name: str | None):
        if name is None:
            return
        # A blank name falls back to the default label
        name = name.strip() or DEFAULT_NAMES[mark]
        if mark == "X":
            self.x = name
        else:
            self.o = name


def new_game() -> GameState:
    return game.init_game(settings.default_board_size, settings.default_marks_to_win)


@dataclass
class GameSession:
    """Owns the single live GameState and replaces it on every change."""

    session_id: str
    state: GameState = field(default_factory=new_game)
    players: Players = field(default_factory=Players)

    def place_mark(self, row: int, col: int) -> GameState:
        previous = self.state
        self.state = game.apply_move(previous, row, col)
        if self.state is previous:
            logger.debug("Session %s: ignored move (%d, %d)", self.session_id, row, col)
        elif self.state.is_over:
            logger.info(
                "Session %s: game over, status=%s winner=%s",
                self.session_id, self.state.status, self.state.winner,
            )
        return self.state

    def reset(self) -> GameState:
        self.state = game.reset(self.state)
        return self.state

    def configure(self, board_size: int, marks_to_win: int) -> GameState:
        # Changing the settings always forfeits the game in progress
        self.state = game.reconfigure(board_size, marks_to_win)
        logger.info(
            "Session %s: reconfigured to %dx%d, %d to win",
            self.session_id, board_size, board_size, marks_to_win,
        )
        return self.state

    def set_players(self, player_x: str | None = None, player_o: str | None = None):
        self.players.rename("X", player_x)
        self.players.rename("O", player_o)

    def status_message(self) -> str:
        state = self.state
        if state.status == "won":
            return f"🎉 {self.players.name_for(state.winner)} ({state.winner}) wins!"
        if state.status == "draw":
            return "Game over! It's a draw!"
        return f"{self.players.name_for(state.current_turn)}'s turn ({state.current_turn})"

    def snapshot(self) -> dict:
        state = self.state
        return StateMsg(
            board=[list(row) for row in state.board],
            board_size=state.board_size,
            marks_to_win=state.marks_to_win,
            current_turn=state.current_turn,
            status=state.status,
            winner=state.winner,
            players=PlayersInfo(X=self.players.x, O=self.players.o),
            message=self.status_message(),
        ).model_dump()


class SessionManager:
    def __init__(self):
        self.sessions: dict[WebSocket, GameSession] = {}
        self._counter = 0

    async def open(self, ws: WebSocket) -> GameSession:
        self._counter += 1
        session = GameSession(session_id=f"s{self._counter}")
        self.sessions[ws] = session
        logger.info("Session %s opened", session.session_id)

        await ws.send_json(session.snapshot())
        return session

    def get(self, ws: WebSocket) -> GameSession | None:
        return self.sessions.get(ws)

    async def handle_message(self, ws: WebSocket, data: dict):
        """Apply one client request and reply with the resulting state."""
        session = self.get(ws)
        if session is None:
            await ws.send_json(ErrorMsg(message="No active session").model_dump())
            return

        msg = parse_client_message(data)
        if isinstance(msg, ErrorMsg):
            logger.warning("Session %s: rejected message: %s", session.session_id, msg.message)
            await ws.send_json(msg.model_dump())
            return

        if isinstance(msg, PlaceMarkMsg):
            session.place_mark(msg.row, msg.col)
        elif isinstance(msg, ResetMsg):
            session.reset()
        elif isinstance(msg, ConfigureMsg):
            session.configure(msg.board_size, msg.marks_to_win)
        elif isinstance(msg, SetPlayersMsg):
            session.set_players(msg.player_x, msg.player_o)

        await ws.send_json(session.snapshot())

    def close(self, ws: WebSocket):
        session = self.sessions.pop(ws, None)
        if session is not None:
            logger.info("Session %s closed", session.session_id)


session_manager = SessionManager()
