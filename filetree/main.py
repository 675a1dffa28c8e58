import logging

from fastapi import FastAPI, WebSocket, WebSocketDisconnect

from filetree.config import get_settings
from filetree.routers import selection, tree
from filetree.websocket import renderers

logging.basicConfig(
    level=get_settings().log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="File Tree API")

app.include_router(tree.router)
app.include_router(selection.router)


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket):
    """Renderer connection; receives node_selected broadcasts"""
    await renderers.connect(websocket)
    try:
        while True:
            await websocket.receive_text()
    except WebSocketDisconnect:
        renderers.disconnect(websocket)
