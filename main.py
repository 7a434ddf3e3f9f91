"""
Chara Dasha API — FastAPI Backend v1.0
======================================
Endpoints:
  POST /api/chara-dasha          — Full Chara Dasha tree + karakas
  POST /api/chara-dasha/current  — Active mahadasha / antardasha only
  POST /api/pdf                  — PDF timeline report
  GET  /api/health               — Health check
"""

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import StreamingResponse
from pydantic import BaseModel, Field
from typing import Dict, Optional
from datetime import date
import io

from chara_engine import generate_chara_dasha
from chara_engine.config import (
    DEFAULT_NUMBER_OF_CYCLES, MAX_NUMBER_OF_CYCLES, MAX_LEVELS, LOG_LEVEL, LOG_JSON,
)
from chara_engine.core.errors import CharaEngineError
from chara_engine.logging_config import setup_logging, get_logger
from pdf_report import generate_pdf_report

setup_logging(LOG_LEVEL, LOG_JSON)
logger = get_logger("chara_engine.api", {"layer": "api"})

app = FastAPI(
    title="Chara Dasha API",
    version="1.0.0",
    description="Jaimini Chara Dasha engine: sign periods, sub-periods, chara karakas",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Request Models ─────────────────────────────────────────────

class CharaDashaRequest(BaseModel):
    birth_date:          date
    ascendant_longitude: float            = Field(..., ge=0, lt=360)
    planets:             Dict[str, float] = Field(...,
                            description="Sidereal longitudes keyed by planet name")
    on_date:             Optional[date]   = Field(None,
                            description="Date for the current periods (default: today)")
    number_of_cycles:    int              = Field(DEFAULT_NUMBER_OF_CYCLES,
                                                  ge=1, le=MAX_NUMBER_OF_CYCLES)
    levels:              int              = Field(2, ge=1, le=MAX_LEVELS)
    dual_lord_rule:      str              = Field("primary",
                                                  pattern="^(primary|co_lord|stronger)$")
    own_sign_fallback:   bool             = False


class PDFRequest(BaseModel):
    result: dict
    name:   Optional[str] = "Native"


# ── Utilities ──────────────────────────────────────────────────

def _compute(data: CharaDashaRequest) -> dict:
    try:
        return generate_chara_dasha(
            birth_date=data.birth_date,
            ascendant_longitude=data.ascendant_longitude,
            planet_longitudes=data.planets,
            on_date=data.on_date or date.today(),
            number_of_cycles=data.number_of_cycles,
            levels=data.levels,
            dual_lord_rule=data.dual_lord_rule,
            own_sign_fallback=data.own_sign_fallback,
        )
    except (CharaEngineError, ValueError) as e:
        logger.warning("Chara Dasha request rejected: %s", e)
        raise HTTPException(status_code=400, detail=str(e))


# ── Endpoints ──────────────────────────────────────────────────

@app.get("/api/health")
def health():
    return {
        "status": "ok",
        "service": "Chara Dasha API",
        "version": "1.0.0",
        "endpoints": [
            "POST /api/chara-dasha",
            "POST /api/chara-dasha/current",
            "POST /api/pdf",
        ],
    }


@app.post("/api/chara-dasha")
def chara_dasha_endpoint(data: CharaDashaRequest):
    """
    Compute the Chara Dasha for a chart.

    Returns:
    • Lagna sign and counting direction (odd → forward, even → backward)
    • Lord position and dasha years of every sign
    • All mahadashas with their antardashas (inclusive date ranges)
    • Chara karakas and karakamsha
    • Active mahadasha / antardasha with progress and remaining days
    """
    return {"success": True, "chara_dasha": _compute(data)}


@app.post("/api/chara-dasha/current")
def chara_dasha_current_endpoint(data: CharaDashaRequest):
    result = _compute(data)
    return {
        "success": True,
        "lagna": result["lagna"],
        "direction": result["direction"],
        "current": result["current"],
    }


@app.post("/api/pdf")
def pdf_endpoint(data: PDFRequest):
    try:
        pdf_bytes = generate_pdf_report(data.result, data.name)
    except (KeyError, TypeError) as e:
        raise HTTPException(status_code=400, detail=f"Malformed result: {e}")
    return StreamingResponse(
        io.BytesIO(pdf_bytes),
        media_type="application/pdf",
        headers={
            "Content-Disposition": f"attachment; filename=chara_dasha_{data.name}.pdf"
        },
    )
