"""REST service to play Klondike in the browser or from scripts."""

from __future__ import annotations

import logging
import uuid
from dataclasses import asdict
from random import Random
from typing import Dict, Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from klondike.config import configure_logging, load_config
from klondike.game import KlondikeGame
from klondike.service import SolitaireService, TableView

logger = logging.getLogger(__name__)


class StartRequest(BaseModel):
    seed: Optional[int] = None


class SelectRequest(BaseModel):
    kind: str
    pile: Optional[int] = None
    index: Optional[int] = None


class ActivateRequest(BaseModel):
    kind: str
    index: int


sessions: Dict[str, SolitaireService] = {}


app = FastAPI(title="Klondike Play Service")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
configure_logging(load_config())


@app.exception_handler(RequestValidationError)
async def malformed_payload(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})


def serialize_state(view: TableView) -> Dict[str, object]:
    return asdict(view)


def ensure_session(session_id: str) -> SolitaireService:
    session = sessions.get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Session not found")
    return session


@app.post("/session/start")
def start_session(request: StartRequest) -> Dict[str, object]:
    config = load_config()
    seed = request.seed if request.seed is not None else config.seed
    game = KlondikeGame(config=config, rng=Random(seed))
    service = SolitaireService(game=game)
    session_id = uuid.uuid4().hex
    sessions[session_id] = service
    logger.info("Started session %s", session_id)
    return {
        "session_id": session_id,
        "state": serialize_state(service.get_view()),
    }


@app.get("/session/{session_id}")
def get_session(session_id: str) -> Dict[str, object]:
    service = ensure_session(session_id)
    return {"state": serialize_state(service.get_view())}


@app.post("/session/{session_id}/new")
def new_game(session_id: str) -> Dict[str, object]:
    service = ensure_session(session_id)
    return {"state": serialize_state(service.start_new_game())}


@app.post("/session/{session_id}/draw")
def draw(session_id: str) -> Dict[str, object]:
    service = ensure_session(session_id)
    return {"state": serialize_state(service.draw())}


@app.post("/session/{session_id}/select")
def select(session_id: str, request: SelectRequest) -> Dict[str, object]:
    service = ensure_session(session_id)
    payload = request.model_dump(exclude_none=True)
    try:
        view = service.select(payload)
    except (ValueError, IndexError) as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return {"state": serialize_state(view)}


@app.post("/session/{session_id}/activate")
def activate(session_id: str, request: ActivateRequest) -> Dict[str, object]:
    service = ensure_session(session_id)
    try:
        view = service.activate(request.model_dump())
    except (ValueError, IndexError) as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return {"state": serialize_state(view)}


@app.post("/session/{session_id}/undo")
def undo(session_id: str) -> Dict[str, object]:
    service = ensure_session(session_id)
    return {"state": serialize_state(service.undo())}


@app.get("/session/{session_id}/hint")
def hint(session_id: str) -> Dict[str, object]:
    service = ensure_session(session_id)
    return {"hint": service.hint()}
