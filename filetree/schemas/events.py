from typing import Literal

from pydantic import BaseModel

from filetree.schemas.tree import Point


class SelectionRequest(BaseModel):
    """Query point already mapped from screen pixels to world coordinates"""
    x: float
    y: float


class NodeSelected(BaseModel):
    """Selection event for WebSocket broadcast"""
    type: Literal["node_selected"] = "node_selected"
    name: str
    path: str
    is_dir: bool
    position: Point
