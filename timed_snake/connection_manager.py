"""WebSocket connection management and state serialization."""

import asyncio
import json
import logging
from typing import Optional

from fastapi import WebSocket

from .game import GameEngine
from .models import Cell, EngineConfig
from .scheduler import Scheduler
from .views import GameView

logger = logging.getLogger(__name__)


def cells_to_list(cells) -> list[list[int]]:
    return [[x, y] for x, y in cells]


def build_welcome_msg(engine: GameEngine) -> str:
    return json.dumps({
        "type": "welcome",
        "grid": [engine.grid.cols, engine.grid.rows],
        "snapshot": engine.snapshot(),
    })


def build_state_msg(snake_segments: list[Cell], food_positions: list[Cell]) -> str:
    return json.dumps({
        "type": "state",
        "snake": cells_to_list(snake_segments),
        "food": cells_to_list(food_positions),
    })


class ClientView(GameView):
    """Queues engine notifications as JSON frames for one WebSocket.

    The engine calls in synchronously from timer callbacks; pump() drains
    the outbox from a task so frames go out in the order they were made.
    """

    def __init__(self):
        self.outbox: asyncio.Queue[str] = asyncio.Queue()

    def draw(self, snake_segments, food_positions):
        self.outbox.put_nowait(build_state_msg(snake_segments, food_positions))

    def set_score(self, score):
        self.outbox.put_nowait(json.dumps({"type": "score", "score": score}))

    def set_elapsed(self, seconds):
        self.outbox.put_nowait(json.dumps({"type": "elapsed", "seconds": seconds}))

    def show_game_over(self):
        self.outbox.put_nowait(json.dumps({"type": "game_over", "visible": True}))

    def hide_game_over(self):
        self.outbox.put_nowait(json.dumps({"type": "game_over", "visible": False}))

    async def pump(self, ws: WebSocket):
        while True:
            message = await self.outbox.get()
            try:
                await ws.send_text(message)
            except Exception:
                logger.debug("Send failed, stopping client pump", exc_info=True)
                return


class Session:
    def __init__(self, engine: GameEngine, view: ClientView):
        self.engine = engine
        self.view = view
        self.sender: Optional[asyncio.Task] = None


class ConnectionManager:
    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = config
        self.connections: dict[WebSocket, Session] = {}

    async def connect(self, ws: WebSocket) -> Session:
        await ws.accept()
        view = ClientView()
        engine = GameEngine(view, Scheduler(), self.config)
        session = Session(engine, view)
        await self.send_personal(ws, build_welcome_msg(engine))
        self.connections[ws] = session
        engine.start()
        session.sender = asyncio.create_task(view.pump(ws))
        logger.info("Client connected (%d active)", len(self.connections))
        return session

    def disconnect(self, ws: WebSocket):
        session = self.connections.pop(ws, None)
        if session is None:
            return
        session.engine.end()
        if session.sender is not None:
            session.sender.cancel()
        logger.info("Client disconnected (%d active)", len(self.connections))

    async def send_personal(self, ws: WebSocket, message: str):
        await ws.send_text(message)
