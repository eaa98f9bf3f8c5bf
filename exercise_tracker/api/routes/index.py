"""Index Page — serves the HTML form page at the site root.

Invariants:
    - GET / returns views/index.html from the installed package

Design Decisions:
    - Paths resolved from the package directory, not the working directory
"""

from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse

PACKAGE_DIR = Path(__file__).resolve().parents[2]
VIEWS_DIR = PACKAGE_DIR / "views"
PUBLIC_DIR = PACKAGE_DIR / "public"

router = APIRouter(tags=["index"])


@router.get("/", include_in_schema=False)
async def index():
    return FileResponse(VIEWS_DIR / "index.html", media_type="text/html")
