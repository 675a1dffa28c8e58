from fastapi import APIRouter, HTTPException

from filetree.schemas.events import NodeSelected, SelectionRequest
from filetree.schemas.tree import Point
from filetree.services.tree_service import tree_service
from filetree.websocket import renderers

router = APIRouter(prefix="/api/selection", tags=["selection"])


@router.post("", response_model=NodeSelected)
async def select_node(request: SelectionRequest):
    """
    Select the node nearest to a world-space point and broadcast it to renderers
    """
    if tree_service.layout is None:
        raise HTTPException(status_code=409, detail="No tree loaded")

    selected = tree_service.select(Point(x=request.x, y=request.y))

    await renderers.send_selection(selected)

    return selected
