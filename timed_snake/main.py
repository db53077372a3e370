"""FastAPI application — HTTP route and WebSocket endpoint."""

import json
import logging
import os

from fastapi import FastAPI, WebSocket, WebSocketDisconnect
from fastapi.responses import FileResponse

from .connection_manager import ConnectionManager

logger = logging.getLogger(__name__)

app = FastAPI()
manager = ConnectionManager()

HTML_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "index.html")


@app.get("/")
async def serve_index():
    return FileResponse(HTML_PATH, media_type="text/html")


@app.websocket("/ws")
async def websocket_endpoint(ws: WebSocket):
    try:
        session = await manager.connect(ws)
        engine = session.engine
        while True:
            message = await ws.receive()
            if message["type"] == "websocket.disconnect":
                raise WebSocketDisconnect(message.get("code", 1000))
            raw = message.get("text")
            if raw is None:
                logger.debug("Ignoring binary frame")
                continue
            try:
                msg = json.loads(raw)
            except json.JSONDecodeError:
                logger.debug("Ignoring malformed frame: %r", raw[:80])
                continue
            if not isinstance(msg, dict):
                logger.debug("Ignoring non-object frame: %r", raw[:80])
                continue

            if msg.get("type") == "input":
                key = msg.get("key")
                if isinstance(key, str):
                    engine.propose_direction(key)
            elif msg.get("type") == "restart":
                engine.start()
            else:
                logger.debug("Ignoring message type %r", msg.get("type"))
    except WebSocketDisconnect:
        pass
    finally:
        manager.disconnect(ws)


if __name__ == "__main__":
    import uvicorn
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    print("Snake server starting on http://localhost:8765")
    uvicorn.run(app, host="0.0.0.0", port=8765)
