"""
Renderer connections.

Every connected renderer receives each selection as
{"type": "node_selected", "data": {...}}.
"""

import json
import logging
from typing import List

from fastapi import WebSocket

from filetree.schemas.events import NodeSelected

logger = logging.getLogger(__name__)


class RendererConnections:
    """Open renderer sockets that selections are pushed to"""

    def __init__(self):
        self.sockets: List[WebSocket] = []

    async def connect(self, websocket: WebSocket):
        await websocket.accept()
        self.sockets.append(websocket)
        logger.info(f"Renderer connected ({len(self.sockets)} open)")

    def disconnect(self, websocket: WebSocket):
        if websocket in self.sockets:
            self.sockets.remove(websocket)
            logger.info(f"Renderer disconnected ({len(self.sockets)} open)")

    async def send_selection(self, event: NodeSelected) -> int:
        """
        Push a selection to every renderer.

        Sockets that fail to send are closed out of the pool.

        Args:
            event: Selected node

        Returns:
            int: Number of renderers that received the event
        """
        message_json = json.dumps({"type": event.type, "data": event.model_dump(mode="json")})

        delivered = 0
        for websocket in list(self.sockets):
            try:
                await websocket.send_text(message_json)
                delivered += 1
            except Exception as e:
                logger.debug(f"Dropping renderer after send failure: {e}")
                self.sockets.remove(websocket)

        return delivered


# Global renderer connection pool
renderers = RendererConnections()
