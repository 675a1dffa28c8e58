from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, computed_field


class Point(BaseModel):
    """2D point in world coordinates"""
    x: float
    y: float


class Node(BaseModel):
    """Filesystem entry in the laid-out tree"""
    name: str
    path: str
    is_dir: bool = False
    children: List["Node"] = Field(default_factory=list)
    leaf_count: int = 1
    x: Optional[float] = None
    y: Optional[float] = None

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def position(self) -> Optional[Point]:
        if self.x is None or self.y is None:
            return None
        return Point(x=self.x, y=self.y)


Node.model_rebuild()


class LayoutSpace(BaseModel):
    """Constants shared by the layout engine and nearest-node queries"""
    slot_width: float
    y_spacing: float
    total_leaves: int
    total_levels: int
    viewport_height: float

    @computed_field
    @property
    def world_width(self) -> float:
        return self.total_leaves * self.slot_width

    @computed_field
    @property
    def world_height(self) -> float:
        return (self.total_levels - 1) * self.y_spacing

    @computed_field
    @property
    def center(self) -> Point:
        """Initial camera centre: middle of the tree, half a viewport down"""
        return Point(x=self.world_width / 2, y=self.viewport_height / 2)


class TreeLayout(BaseModel):
    """Complete laid-out tree"""
    root: str
    tree: Node
    space: LayoutSpace
    skipped: List[str] = Field(default_factory=list)
    scanned_at: datetime
