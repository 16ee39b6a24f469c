"""FastAPI application for the AI receptionist ROI calculator: REST endpoints and SSE."""

from __future__ import annotations

import logging
from typing import Any, Optional, Union
from uuid import uuid4

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, StreamingResponse
from pydantic import BaseModel, StrictFloat, StrictInt, StrictStr

from receptionist_roi.config.settings import get_settings
from receptionist_roi.display import build_report
from receptionist_roi.engine.calculator import compute
from receptionist_roi.models.enums import AnalysisMode, DaysOpenMode, Industry, PricingTier
from receptionist_roi.models.inputs import CalculatorInputs
from receptionist_roi.presets.loader import get_industry_presets, get_pricing_tier, get_pricing_tiers
from receptionist_roi.presets.schema import industry_label
from receptionist_roi.session import CalculatorSession
from receptionist_roi.streaming import SessionEventType, StreamManager
from receptionist_roi.validation import InvalidInput

settings = get_settings()

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="AI Receptionist ROI API", version="0.1.0")

# CORS: allow the calculator frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Singleton stream manager
stream_manager = StreamManager()

# In-memory session store, one entry per open calculator
_sessions: dict[str, CalculatorSession] = {}


class CreateSessionRequest(BaseModel):
    industry: Optional[Industry] = None
    tier: Optional[PricingTier] = None


class FieldUpdateRequest(BaseModel):
    name: str
    value: Union[StrictStr, StrictFloat, StrictInt]


class IndustryRequest(BaseModel):
    industry: Industry


class TierRequest(BaseModel):
    tier: PricingTier


class OptionsRequest(BaseModel):
    days_open: Optional[DaysOpenMode] = None
    analysis_mode: Optional[AnalysisMode] = None


@app.exception_handler(InvalidInput)
async def invalid_input_handler(request: Request, exc: InvalidInput) -> JSONResponse:
    return JSONResponse(status_code=422, content={"error": str(exc), "fields": exc.fields})


def _get_session(session_id: str) -> CalculatorSession:
    session = _sessions.get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Session not found")
    return session


def _report(session: CalculatorSession, print_mode: bool = False) -> dict[str, Any]:
    return build_report(
        session.result,
        session.analysis_mode,
        booking_url=settings.booking_url,
        tier_name=get_pricing_tier(session.pricing_tier).name,
        print_mode=print_mode,
    )


def _session_view(session_id: str, session: CalculatorSession) -> dict[str, Any]:
    return {"session_id": session_id, **session.snapshot(), "report": _report(session)}


async def _announce(
    session_id: str,
    session: CalculatorSession,
    event_type: SessionEventType,
    data: dict[str, Any],
    previous_revision: int,
) -> None:
    """Emit the mutation event, then the recalculated result if inputs changed."""
    await stream_manager.publish(session_id, event_type, {"session_id": session_id, **data})
    if session.revision != previous_revision:
        await stream_manager.publish(session_id, SessionEventType.RESULT_RECALCULATED, {
            "session_id": session_id,
            "revision": session.revision,
            "result": session.result.to_dict(),
        })


@app.get("/api/pricing-tiers")
async def list_pricing_tiers():
    """Pricing tier constants."""
    return {tier.value: config.model_dump() for tier, config in get_pricing_tiers().items()}


@app.get("/api/industries")
async def list_industries():
    """Industry presets with display labels."""
    return {
        industry.value: {**preset.model_dump(mode="json"), "label": industry_label(industry, preset)}
        for industry, preset in get_industry_presets().items()
    }


@app.post("/api/calculate")
async def calculate(body: CalculatorInputs, print_mode: bool = Query(False, alias="print")):
    """Stateless calculation for a complete input set."""
    result = compute(body)
    report = build_report(
        result,
        body.analysis_mode,
        booking_url=settings.booking_url,
        tier_name=get_pricing_tier(body.pricing_tier).name,
        print_mode=print_mode,
    )
    return {"result": result.to_dict(), "report": report}


@app.post("/api/sessions")
async def create_session(body: CreateSessionRequest):
    """Open a calculator seeded with industry and tier presets."""
    session_id = str(uuid4())
    session = CalculatorSession(industry=body.industry, tier=body.tier, settings=settings)
    _sessions[session_id] = session
    logger.info("Session %s created (%s, %s)", session_id, session.industry.value, session.pricing_tier.value)

    await stream_manager.publish(session_id, SessionEventType.SESSION_CREATED, {
        "session_id": session_id,
        "industry": session.industry.value,
        "pricing_tier": session.pricing_tier.value,
    })
    return _session_view(session_id, session)


@app.get("/api/sessions/{session_id}")
async def get_session(session_id: str):
    """Current inputs, validation state and result."""
    return _session_view(session_id, _get_session(session_id))


@app.delete("/api/sessions/{session_id}")
async def delete_session(session_id: str):
    _get_session(session_id)
    del _sessions[session_id]
    await stream_manager.publish(session_id, SessionEventType.SESSION_DELETED, {"session_id": session_id})
    stream_manager.discard(session_id)
    logger.info("Session %s deleted", session_id)
    return {"session_id": session_id, "status": "deleted"}


@app.patch("/api/sessions/{session_id}/fields")
async def update_field(session_id: str, body: FieldUpdateRequest):
    """Apply one numeric edit. Invalid values are flagged, not rejected."""
    session = _get_session(session_id)
    previous = session.revision
    normalized = session.update_field(body.name, body.value)

    event_type = SessionEventType.FIELD_UPDATED if normalized.valid else SessionEventType.FIELD_REJECTED
    await _announce(session_id, session, event_type, {
        "field": body.name,
        "raw": normalized.raw,
        "valid": normalized.valid,
    }, previous)
    return _session_view(session_id, session)


@app.put("/api/sessions/{session_id}/industry")
async def select_industry(session_id: str, body: IndustryRequest):
    session = _get_session(session_id)
    previous = session.revision
    session.select_industry(body.industry)
    await _announce(session_id, session, SessionEventType.INDUSTRY_APPLIED, {
        "industry": body.industry.value,
    }, previous)
    return _session_view(session_id, session)


@app.put("/api/sessions/{session_id}/tier")
async def select_tier(session_id: str, body: TierRequest):
    session = _get_session(session_id)
    previous = session.revision
    session.select_tier(body.tier)
    await _announce(session_id, session, SessionEventType.TIER_APPLIED, {
        "pricing_tier": body.tier.value,
    }, previous)
    return _session_view(session_id, session)


@app.put("/api/sessions/{session_id}/options")
async def update_options(session_id: str, body: OptionsRequest):
    session = _get_session(session_id)
    previous = session.revision
    if body.days_open is not None:
        session.set_days_open(body.days_open)
    if body.analysis_mode is not None:
        session.set_analysis_mode(body.analysis_mode)
    await _announce(session_id, session, SessionEventType.OPTIONS_UPDATED, {
        "days_open": session.inputs.days_open.value,
        "analysis_mode": session.analysis_mode.value,
    }, previous)
    return _session_view(session_id, session)


@app.post("/api/sessions/{session_id}/compute")
async def compute_session(session_id: str):
    """The explicit calculate action; 422 while any field is invalid."""
    session = _get_session(session_id)
    try:
        result = session.compute()
    except InvalidInput as e:
        await stream_manager.publish(session_id, SessionEventType.COMPUTE_BLOCKED, {
            "session_id": session_id,
            "fields": e.fields,
        })
        raise
    return {"session_id": session_id, "result": result.to_dict(), "report": _report(session)}


@app.get("/api/sessions/{session_id}/report")
async def session_report(session_id: str, print_mode: bool = Query(False, alias="print")):
    """Display payload; ``?print=true`` renders for print/PDF."""
    return _report(_get_session(session_id), print_mode=print_mode)


@app.get("/api/sessions/{session_id}/stream")
async def stream_session(session_id: str, request: Request):
    """SSE endpoint streaming session edits and recalculations."""
    _get_session(session_id)
    last_event_id: int | None = None
    raw = request.headers.get("Last-Event-ID") or request.headers.get("last-event-id")
    if raw is not None:
        try:
            last_event_id = int(raw)
        except ValueError:
            pass

    generator = stream_manager.event_generator(session_id, last_event_id=last_event_id)
    return StreamingResponse(generator, media_type="text/event-stream")


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "ok"}
