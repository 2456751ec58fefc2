from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import uvicorn
from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel, ConfigDict, Field
from starlette.middleware.sessions import SessionMiddleware

from .assessments.models import AssessmentCheck, AssessmentIn
from .assessments.service import get_assessment, has_assessment, save_assessment
from .auth.dependencies import require_user
from .auth.users import get_user, google_login, google_signup, login, signup
from .errors import ServiceError
from .llm.gemini_client import generate_text
from .recommendations.matcher import get_recommendations
from .recommendations.models import RecommendationResponse
from .storage import JsonRecordStore, RecordStore

logger = logging.getLogger(__name__)

app = FastAPI(title="College Match API", version="1.0.0")
app.add_middleware(
    SessionMiddleware,
    secret_key=os.environ.get("SESSION_SECRET", "college-match-secret-change-in-production"),
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

_STATIC_DIR = Path(
    os.environ.get("STATIC_DIR", Path(__file__).resolve().parent / "static")
)

_store: RecordStore = JsonRecordStore()


def get_store() -> RecordStore:
    return _store


@app.exception_handler(ServiceError)
def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


# ── Request bodies ───────────────────────────────────────────────────────


class SignupRequest(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str | None = None
    username: str | None = None
    password: str | None = None
    email: str | None = None


class LoginRequest(BaseModel):
    username: str = ""
    password: str = ""


class GoogleLoginRequest(BaseModel):
    email: str = ""


class PromptRequest(BaseModel):
    prompt: str = Field(default="", max_length=20000)


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/get-colleges")
def get_colleges(store: RecordStore = Depends(get_store)) -> list[dict[str, Any]]:
    return store.load_colleges()


@app.get("/get-recommendations/{username}", response_model=RecommendationResponse)
def recommendations(
    username: str, store: RecordStore = Depends(get_store)
) -> RecommendationResponse:
    try:
        return get_recommendations(store, username)
    except ServiceError:
        raise
    except Exception:
        logger.exception("Recommendation lookup failed for %s", username)
        raise HTTPException(status_code=500, detail="Failed to get recommendations")


# ── Assessment endpoints ─────────────────────────────────────────────────


@app.post("/save-assessment")
def save_assessment_endpoint(
    body: AssessmentIn, store: RecordStore = Depends(get_store)
) -> dict[str, str]:
    return save_assessment(store, body.model_dump(exclude_none=True))


@app.get("/check-assessment/{username}", response_model=AssessmentCheck)
def check_assessment(username: str, store: RecordStore = Depends(get_store)) -> AssessmentCheck:
    return AssessmentCheck(hasTakenAssessment=has_assessment(store, username))


@app.get("/get-assessment/{username}")
def get_assessment_endpoint(
    username: str, store: RecordStore = Depends(get_store)
) -> dict[str, Any]:
    return get_assessment(store, username)


# ── Account endpoints ────────────────────────────────────────────────────


@app.post("/signup")
def signup_endpoint(body: SignupRequest, store: RecordStore = Depends(get_store)) -> dict:
    signup(store, body.model_dump(exclude_none=True))
    return {"status": "success"}


@app.post("/login")
def login_endpoint(
    body: LoginRequest, request: Request, store: RecordStore = Depends(get_store)
) -> dict:
    user = login(store, body.username, body.password)
    request.session["user"] = user
    return {"status": "success", "user": user}


@app.post("/google-signup")
def google_signup_endpoint(
    body: SignupRequest, store: RecordStore = Depends(get_store)
) -> dict:
    google_signup(store, body.model_dump(exclude_none=True))
    return {"status": "success"}


@app.post("/google-login")
def google_login_endpoint(
    body: GoogleLoginRequest, request: Request, store: RecordStore = Depends(get_store)
) -> dict:
    user = google_login(store, body.email)
    request.session["user"] = user
    return {"status": "success", "user": user}


@app.get("/get-user/{username}")
def get_user_endpoint(username: str, store: RecordStore = Depends(get_store)) -> dict:
    return get_user(store, username)


@app.post("/auth/logout")
def logout(request: Request) -> dict:
    request.session.clear()
    return {"status": "logged_out"}


@app.get("/auth/me")
def auth_me(user: dict = Depends(require_user)) -> dict:
    return user


# ── Generative-AI proxy ──────────────────────────────────────────────────


@app.post("/gemini-proxy")
def gemini_proxy(body: PromptRequest) -> dict[str, str]:
    return {"text": generate_text(body.prompt)}


# ── Static frontend ──────────────────────────────────────────────────────


if _STATIC_DIR.is_dir():
    app.mount("/static", StaticFiles(directory=str(_STATIC_DIR)), name="static")


@app.get("/")
def root():
    index = _STATIC_DIR / "index.html"
    if not index.is_file():
        raise HTTPException(status_code=404, detail="Frontend not found")
    return FileResponse(str(index))


def main() -> None:
    uvicorn.run(
        app,
        host=os.environ.get("HOST", "127.0.0.1"),
        port=int(os.environ.get("PORT", "3000")),
    )


if __name__ == "__main__":
    main()
