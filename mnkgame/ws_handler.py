"""WebSocket endpoint and message routing."""

import json
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from mnkgame.models import ErrorMsg
from mnkgame.session import session_manager

logger = logging.getLogger(__name__)

router = APIRouter()


async def receive_payload(ws: WebSocket):
    """Read one frame, text or binary, and decode it as JSON."""
    message = await ws.receive()
    if message["type"] == "websocket.disconnect":
        raise WebSocketDisconnect(message.get("code", 1000))
    raw = message.get("text")
    if raw is None:
        raw = message.get("bytes") or b""
    return json.loads(raw)


@router.websocket("/ws")
async def websocket_endpoint(ws: WebSocket):
    await ws.accept()
    await session_manager.open(ws)
    try:
        while True:
            try:
                data = await receive_payload(ws)
            except ValueError:
                logger.debug("Received non-JSON frame")
                await ws.send_json(ErrorMsg(message="Unknown or invalid message").model_dump())
                continue
            await session_manager.handle_message(ws, data)
    except WebSocketDisconnect:
        pass
    finally:
        session_manager.close(ws)
