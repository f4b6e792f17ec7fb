"""Root route."""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from ..templates import render_root

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
def root() -> str:
    """Root: welcome page with clickable links."""
    return render_root()
