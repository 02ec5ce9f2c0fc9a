"""FastAPI web service for Markdown to DOCX conversion.

Endpoints::

    GET  /              Minimal upload form.
    POST /convert       Upload a .md file and receive .docx back.
    POST /convert/text  Send raw Markdown text, receive .docx bytes.
    GET  /health        Health check.
    GET  /styles        List available style presets.

Run::

    uvicorn docxwriter.server:app --host 0.0.0.0 --port 8000
"""

from __future__ import annotations

from urllib.parse import quote

from fastapi import FastAPI, File, Form, HTTPException, UploadFile
from fastapi.responses import HTMLResponse, Response

from docxwriter import __version__
from docxwriter.converter import Converter
from docxwriter.logger import get_logger
from docxwriter.package import DOCX_MEDIA_TYPE
from docxwriter.style_manager import StyleManager

logger = get_logger(__name__)

app = FastAPI(
    title="docxwriter",
    description="Markdown to DOCX conversion service",
    version=__version__,
)

_INDEX_HTML = """<!doctype html>
<html><head><meta charset="utf-8"><title>docxwriter</title></head>
<body>
<h1>docxwriter</h1>
<form action="/convert" method="post" enctype="multipart/form-data">
<input type="file" name="file" accept=".md,.markdown,.txt">
<label><input type="checkbox" name="page_numbers" value="true"> page numbers</label>
<button type="submit">Convert</button>
</form>
</body></html>
"""


def _content_disposition(filename: str) -> str:
    """Build Content-Disposition header, RFC 5987 for non-ASCII names."""
    try:
        filename.encode("ascii")
        return f'attachment; filename="{filename}"'
    except UnicodeEncodeError:
        encoded = quote(filename)
        return f"attachment; filename*=UTF-8''{encoded}"


def _convert(markdown: str, style: str, page_numbers: bool) -> bytes:
    try:
        converter = Converter(style_preset=style, page_numbers=page_numbers)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    data = converter.convert_text(markdown)
    logger.info("Converted %d characters into %d bytes", len(markdown), len(data))
    return data


@app.get("/", response_class=HTMLResponse)
async def index() -> HTMLResponse:
    """Serve the upload form."""
    return HTMLResponse(content=_INDEX_HTML)


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok", "version": __version__}


@app.get("/styles")
async def list_styles() -> dict[str, list[str]]:
    """List available style presets and the semantic style names they define."""
    return {"presets": StyleManager.PRESETS, "styles": StyleManager().list_style_names()}


@app.post("/convert")
async def convert_file(
    file: UploadFile = File(...),
    style: str = Form("default"),
    encoding: str = Form("utf-8"),
    page_numbers: bool = Form(False),
) -> Response:
    """Upload a Markdown file and receive DOCX back.

    - **file**: Markdown file (.md)
    - **style**: Style preset name (default, academic, business, minimal)
    - **encoding**: Source file encoding
    - **page_numbers**: Add a page-number footer
    """
    raw = await file.read()
    try:
        md_text = raw.decode(encoding)
    except (LookupError, UnicodeDecodeError) as exc:
        raise HTTPException(status_code=400, detail=f"cannot decode upload: {exc}") from exc

    docx_bytes = _convert(md_text, style, page_numbers)
    filename = (file.filename or "document.md").rsplit(".", 1)[0] + ".docx"

    return Response(
        content=docx_bytes,
        media_type=DOCX_MEDIA_TYPE,
        headers={"Content-Disposition": _content_disposition(filename)},
    )


@app.post("/convert/text")
async def convert_text(
    markdown: str = Form(...),
    style: str = Form("default"),
    page_numbers: bool = Form(False),
) -> Response:
    """Send raw Markdown text and receive DOCX bytes.

    - **markdown**: Markdown source text
    - **style**: Style preset name
    """
    docx_bytes = _convert(markdown, style, page_numbers)

    return Response(
        content=docx_bytes,
        media_type=DOCX_MEDIA_TYPE,
        headers={"Content-Disposition": 'attachment; filename="document.docx"'},
    )
