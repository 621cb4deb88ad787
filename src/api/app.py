"""
FastAPI application for the Campus Match service.
Exposes the match endpoint used by the "find people" page.
"""

from contextlib import asynccontextmanager
from datetime import datetime
from functools import lru_cache
from typing import Awaitable, Callable, Optional

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from matcher.intent import IntentAnalyzer
from matcher.service import ProfileStore, find_matches, require_user_id
from shared.config import get_settings
from shared.database import Database, close_database, get_database
from shared.errors import MatchError
from shared.models import ErrorResponse, MatchRequest, MatchResponse


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await close_database()


app = FastAPI(title="Campus Match API", version="1.0.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins_list,
    allow_methods=["*"],
    allow_headers=["authorization", "x-client-info", "apikey", "content-type"],
)


# ============================================================================
# DEPENDENCIES
# ============================================================================

StoreProvider = Callable[[], Awaitable[ProfileStore]]


async def get_store() -> Database:
    """Connected profile store."""
    return await get_database()


def get_store_provider() -> StoreProvider:
    """Provider for the profile store, awaited after the request is validated."""
    return get_store


@lru_cache
def get_analyzer() -> IntentAnalyzer:
    """Intent analyzer built from the configured rules file."""
    return IntentAnalyzer(rules_path=get_settings().intent_rules_path)


# ============================================================================
# ERROR HANDLERS
# ============================================================================

def error_response(
    status_code: int, message: str, headers: Optional[dict[str, str]] = None
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
        headers=headers,
    )


def cors_headers(request: Request) -> dict[str, str]:
    """
    CORS headers for responses built outside CORSMiddleware.

    Errors reaching the catch-all handler skip the middleware.
    """
    origin = request.headers.get("origin")
    allowed = get_settings().cors_origins_list
    if not origin:
        return {}
    if "*" in allowed:
        return {"Access-Control-Allow-Origin": "*"}
    if origin in allowed:
        return {"Access-Control-Allow-Origin": origin, "Vary": "Origin"}
    return {}


@app.exception_handler(MatchError)
async def match_error_handler(request: Request, exc: MatchError):
    return error_response(exc.status_code, exc.message)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Invalid request to {request.url.path}: {exc.errors()}")
    return error_response(400, "Invalid request body")


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception(f"Error in {request.url.path}: {exc}")
    return error_response(500, "Internal server error", headers=cors_headers(request))


# ============================================================================
# HEALTH CHECK
# ============================================================================

@app.get("/")
@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring"""
    return {
        "status": "healthy",
        "service": "campus-match",
        "timestamp": datetime.now().isoformat(),
    }


# ============================================================================
# MATCHING
# ============================================================================

@app.post("/match-users", response_model=MatchResponse)
async def match_users(
    body: MatchRequest,
    store_provider: StoreProvider = Depends(get_store_provider),
    analyzer: IntentAnalyzer = Depends(get_analyzer),
):
    """Rank every other user for the requester, optionally guided by intent text."""
    try:
        user_id = require_user_id(body.user_id)
        store = await store_provider()
        matches = await find_matches(store, user_id, body.user_intent, analyzer=analyzer)
    except MatchError as e:
        return error_response(e.status_code, e.message)
    except Exception as e:
        logger.exception(f"Error in match-users: {e}")
        return error_response(500, "Internal server error")

    return MatchResponse(matches=[m.to_response() for m in matches])
