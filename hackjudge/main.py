"""
HackJudge – FastAPI application entry-point.

Run with:
    uvicorn hackjudge.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from typing import List, Optional

from fastapi import Body, Depends, FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession

from hackjudge.config import settings
from hackjudge.database import Base, describe_database, engine, get_db
from hackjudge.errors import DuplicateTeamError, NotFoundError, PersistenceError, ValidationError
from hackjudge.logging_config import setup_logging
from hackjudge.models.feedback import FeedbackCategory, Reaction
from hackjudge.models.score import CATEGORIES, ROUNDS
from hackjudge.schemas.leaderboard import DomainConfig
from hackjudge.schemas.team import SeedResult, TeamSeed
from hackjudge.seed_data import default_seed
from hackjudge.services import teams as team_service
from hackjudge.services.feedback import MAX_RATING, MIN_RATING
from hackjudge.services.scoring import (
    CATEGORY_COUNT,
    MAX_CATEGORY_SCORE,
    MAX_ROUND_SCORE,
    MIN_CATEGORY_SCORE,
)

# ── Import routers ──
from hackjudge.routers import feedback, leaderboard, teams

setup_logging()
logger = logging.getLogger(__name__)


# ── Lifespan: create tables on startup ──
@asynccontextmanager
async def lifespan(app: FastAPI):
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info(f"{settings.APP_NAME} ready ({describe_database(settings.DATABASE_URL)})")
    yield


app = FastAPI(
    title=settings.APP_NAME,
    description="Hackathon scoring, leaderboard and attendee feedback API.",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ── Register API routers ──
app.include_router(teams.router)
app.include_router(leaderboard.router)
app.include_router(feedback.router)


# ═══════════════════════════════════════════════════════════════
#  Exception handlers
# ═══════════════════════════════════════════════════════════════

@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    logger.warning(f"{request.method} {request.url.path}: {exc.message}")
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": exc.message})


@app.exception_handler(ValidationError)
async def validation_handler(request: Request, exc: ValidationError):
    logger.warning(f"{request.method} {request.url.path}: {exc.message}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": exc.message})


@app.exception_handler(DuplicateTeamError)
async def duplicate_handler(request: Request, exc: DuplicateTeamError):
    logger.warning(f"{request.method} {request.url.path}: {exc.message}")
    return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"detail": exc.message})


@app.exception_handler(PersistenceError)
async def persistence_handler(request: Request, exc: PersistenceError):
    logger.error(f"{request.method} {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": exc.message},
    )


# ═══════════════════════════════════════════════════════════════
#  Service endpoints
# ═══════════════════════════════════════════════════════════════

@app.get("/api/health", response_class=PlainTextResponse)
async def health_check():
    return "Healthy"


@app.get("/api/config", response_model=DomainConfig)
async def domain_config():
    """Rounds, categories, score bounds and reactions the client should display."""
    return DomainConfig(
        rounds=ROUNDS,
        categories=CATEGORIES,
        category_count=CATEGORY_COUNT,
        min_category_score=MIN_CATEGORY_SCORE,
        max_category_score=MAX_CATEGORY_SCORE,
        max_round_score=MAX_ROUND_SCORE,
        feedback_categories=list(FeedbackCategory),
        min_rating=MIN_RATING,
        max_rating=MAX_RATING,
        reactions=list(Reaction),
        default_event_id=settings.DEFAULT_EVENT_ID,
    )


@app.post("/api/seed", response_model=SeedResult)
async def seed(
    payload: Optional[List[TeamSeed]] = Body(None),
    db: AsyncSession = Depends(get_db),
):
    """Upsert the given teams (or the bundled demo teams when no body is sent)."""
    count = await team_service.seed_teams(db, payload if payload is not None else default_seed())
    return SeedResult(message="Database seeded successfully", count=count)
