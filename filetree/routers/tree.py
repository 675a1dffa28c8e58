from fastapi import APIRouter, HTTPException, Query

from filetree.schemas.tree import TreeLayout
from filetree.services.errors import InvalidRootError, ScanError
from filetree.services.tree_service import tree_service

router = APIRouter(prefix="/api/tree", tags=["tree"])


@router.get("", response_model=TreeLayout)
async def get_tree(
    path: str = Query(..., description="Root path to scan"),
    y_scale: float = Query(1.0, gt=0, description="Vertical scale factor"),
    draw_labels: bool = Query(False, description="Size leaf slots to fit labels"),
):
    """
    Scan a directory, lay it out and make it the current tree
    """
    try:
        return tree_service.load(path, y_scale=y_scale, draw_labels=draw_labels)
    except InvalidRootError as e:
        status_code = 404 if e.missing else 400
        raise HTTPException(status_code=status_code, detail=str(e))
    except ScanError as e:
        raise HTTPException(status_code=403, detail=str(e))


@router.get("/current", response_model=TreeLayout)
async def get_current_tree():
    """
    Return the currently loaded tree
    """
    if tree_service.layout is None:
        raise HTTPException(status_code=404, detail="No tree loaded")
    return tree_service.layout
