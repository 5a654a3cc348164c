# keypub/web.py

import logging
import uuid
from typing import Optional

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from config import TEMPLATES_DIR
from .store import KeyRecord, KeyStore, get_store
from .validation import validate_note, validate_public_key, validate_record_id

logger = logging.getLogger(__name__)

# Create a new router for the web interface
router = APIRouter()

# Jinja2Templates turns autoescaping on, keys and notes are always escaped
templates = Jinja2Templates(directory=TEMPLATES_DIR)


def share_url(website_name: str, record_id: str) -> str:
    return f"https://{website_name}/k/{record_id}"


# --- Web UI Endpoints ---

@router.get("/", response_class=HTMLResponse)
async def show_form(request: Request):
    return templates.TemplateResponse(request, "index.html")

@router.post("/publish")
async def publish(
    public_key: str = Form(""),
    note: Optional[str] = Form(None),
    store: KeyStore = Depends(get_store),
):
    # Key first, then note; the first broken rule ends the request
    key = validate_public_key(public_key)
    clean_note = validate_note(note)

    record = KeyRecord(id=str(uuid.uuid4()), public_key=key, note=clean_note)
    await store.create(record)
    logger.info("Published key %s", record.id)

    # Send the publisher straight to the shareable page
    return RedirectResponse(url=f"/k/{record.id}", status_code=303)

@router.get("/k/{record_id}", response_class=HTMLResponse)
async def show_record(record_id: str, request: Request, store: KeyStore = Depends(get_store)):
    # Look up by the canonical form so "{...}" or upper-case ids still match
    rid = str(validate_record_id(record_id))

    record = await store.get(rid)
    if record is None:
        return PlainTextResponse("Key not found", status_code=404)

    return templates.TemplateResponse(
        request,
        "record.html",
        {
            "record": record,
            "full_url": share_url(request.app.state.website_name, record.id),
        },
    )
