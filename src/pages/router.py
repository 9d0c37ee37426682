from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from src.pages.content import FOOTER_TEXT, PAGE_SUBTITLE, PAGE_TITLE, THEOREMS

router = APIRouter(tags=["pages"])
templates = Jinja2Templates(directory=Path(__file__).parent / "templates")


@router.get("/", response_class=HTMLResponse)
async def theorem_page(request: Request):
    """
    Serves the theorem page with one "generate example" button per theorem.
    """
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "page_title": PAGE_TITLE,
            "page_subtitle": PAGE_SUBTITLE,
            "footer_text": FOOTER_TEXT,
            "theorems": THEOREMS,
        },
    )
