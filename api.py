"""
Chinese Numerals — FastAPI Server
=================================

RESTful API for converting Chinese numerals in text to Arabic numbers.

Endpoints:
    POST /convert               Convert every numeral in a text
    POST /convert/file          Upload a UTF-8 text file for conversion
    POST /parse                 Parse one isolated numeral token
    GET  /classify/{character}  Look up one character in the symbol table
    GET  /health                Health check / readiness probe

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Configuration (environment or .env):
    CHINESE_NUMERALS_MAX_UPLOAD_BYTES     Upload size limit (default 1 MB)
"""

from __future__ import annotations

import asyncio
import logging
import math
import os
from contextlib import asynccontextmanager
from enum import Enum
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Request, UploadFile
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, field_serializer

from chinese_numerals import __version__
from chinese_numerals.exceptions import InvalidInput
from chinese_numerals.models import ConversionResult, Number, json_number
from chinese_numerals.parser import parse_numeral
from chinese_numerals.scanner import scan_text
from chinese_numerals.symbols import SYMBOLS, Digit, Multiplier, classify

load_dotenv()

logger = logging.getLogger(__name__)

MAX_UPLOAD_BYTES = int(os.environ.get("CHINESE_NUMERALS_MAX_UPLOAD_BYTES", 1_048_576))


# ─── Application Lifespan ────────────────────────────────────────────

_ready = False


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Mark the service ready once the symbol table is importable."""
    global _ready  # noqa: PLW0603
    _ready = True
    logger.info("Chinese numerals API ready (%d symbols loaded)", len(SYMBOLS))
    yield
    _ready = False


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Chinese Numerals API",
    description=(
        "Converts Chinese numerals (traditional, simplified, financial and "
        "full-width digits) embedded in text into Arabic numbers."
    ),
    version=__version__,
    lifespan=lifespan,
)


@app.exception_handler(InvalidInput)
async def _invalid_input_handler(request: Request, exc: InvalidInput) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={"code": exc.code, "message": str(exc), "details": exc.details},
    )


# ─── Request / Response Schemas ─────────────────────────────────────


class ConvertRequest(BaseModel):
    """Request body for the /convert endpoint."""

    text: str = Field(
        ...,
        description="Free text that may contain Chinese numerals.",
        json_schema_extra={"example": "總價1000萬800呎，共三千二百人"},
    )


class ParseRequest(BaseModel):
    """Request body for the /parse endpoint."""

    token: str = Field(
        ...,
        description="A single numeral, e.g. 一千二百 or 3.5萬.",
        json_schema_extra={"example": "一千萬"},
    )


class ParseResponse(BaseModel):
    token: str
    value: Number

    @field_serializer("value", when_used="json")
    def _serialize_value(self, value: Number):
        return json_number(value)


class SymbolKind(str, Enum):
    DIGIT = "digit"
    MULTIPLIER = "multiplier"
    NOT_A_NUMERAL = "not_a_numeral"


class ClassifyResponse(BaseModel):
    character: str
    kind: SymbolKind
    value: Optional[int] = None  # Digits only
    magnitude: Optional[int] = None  # Multipliers only
    carries_scale: bool = False


class HealthResponse(BaseModel):
    status: str
    version: str
    symbols_loaded: int


# ─── Helpers ─────────────────────────────────────────────────────────


def _require_ready() -> None:
    if not _ready:
        raise HTTPException(status_code=503, detail="Service not initialised")


def _build_classification(character: str) -> ClassifyResponse:
    symbol = classify(character)
    if isinstance(symbol, Digit):
        return ClassifyResponse(character=character, kind=SymbolKind.DIGIT, value=symbol.value)
    if isinstance(symbol, Multiplier):
        return ClassifyResponse(
            character=character,
            kind=SymbolKind.MULTIPLIER,
            magnitude=symbol.magnitude,
            carries_scale=symbol.carries_scale,
        )
    return ClassifyResponse(character=character, kind=SymbolKind.NOT_A_NUMERAL)


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/convert",
    summary="Convert numerals in a text",
    tags=["Conversion"],
    responses={503: {"description": "Service not yet initialised"}},
)
def convert_text(request: ConvertRequest) -> ConversionResult:
    """Replace every numeral run in the text with its Arabic value.

    Returns the converted string together with:
    - **segments**: how the text was split (numeral / separator / literal)
    - **numerals**: the parsed values, in order
    """
    _require_ready()
    return scan_text(request.text)


@app.post(
    "/convert/file",
    summary="Convert numerals in an uploaded text file",
    tags=["Conversion"],
    responses={
        413: {"description": "File too large"},
        400: {"description": "File is not valid UTF-8 text"},
        503: {"description": "Service not yet initialised"},
    },
)
async def convert_file(file: UploadFile) -> ConversionResult:
    """Upload a UTF-8 text file and convert the numerals in it."""
    _require_ready()
    if file.size and file.size > MAX_UPLOAD_BYTES:
        raise HTTPException(status_code=413, detail=f"File too large (max {MAX_UPLOAD_BYTES} bytes)")

    content = await file.read()
    try:
        text = content.decode("utf-8")
    except UnicodeDecodeError:
        raise HTTPException(status_code=400, detail="File must be UTF-8 encoded text")

    return await asyncio.to_thread(scan_text, text)


@app.post(
    "/parse",
    summary="Parse a single numeral token",
    tags=["Conversion"],
    responses={
        422: {"description": "Value outside the floating-point range"},
        503: {"description": "Service not yet initialised"},
    },
)
def parse_token(request: ParseRequest) -> ParseResponse:
    """Parse one numeral. Tokens with nothing parseable return 0."""
    _require_ready()
    value = parse_numeral(request.token)
    if isinstance(value, float) and not math.isfinite(value):
        raise HTTPException(
            status_code=422,
            detail="Numeral value is outside the floating-point range",
        )
    return ParseResponse(token=request.token, value=value)


@app.get(
    "/classify/{character}",
    summary="Classify one character",
    tags=["Symbols"],
    responses={
        422: {"description": "Path is not exactly one character"},
        503: {"description": "Service not yet initialised"},
    },
)
def classify_character(character: str) -> ClassifyResponse:
    """Look up a character: digit, multiplier, or not a numeral."""
    _require_ready()
    return _build_classification(character)


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
    responses={503: {"description": "Service not yet initialised"}},
)
def health_check() -> HealthResponse:
    """Returns service status and symbol table size."""
    _require_ready()
    return HealthResponse(status="healthy", version=__version__, symbols_loaded=len(SYMBOLS))
