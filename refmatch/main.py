"""FastAPI application entry point."""

import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import refmatch.models  # noqa: F401  (registers tables on Base.metadata)
from refmatch.config import settings
from refmatch.core.errors import RefError
from refmatch.core.logger import logger, setup_logger
from refmatch.db.database import Base, async_session, engine
from refmatch.db.json_store import JsonFileStore
from refmatch.db.redis import close_redis
from refmatch.db.sql_store import SqlStore
from refmatch.services.seed_service import seed_service

setup_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.STORE_BACKEND == "json":
        # Demo mode: single process, whole state in one JSON file
        app.state.json_store = JsonFileStore(
            settings.JSON_STORE_PATH, seed_profiles=seed_service.profile_documents()
        )
        logger.info("Using JSON file store at {}", settings.JSON_STORE_PATH)
    else:
        # Startup: create tables (dev only; use migrations in production)
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        if settings.SEED_DEMO_USERS:
            async with async_session() as db:
                await seed_service.seed_store(SqlStore(db))
                await db.commit()
    yield
    # Shutdown: close connections
    await engine.dispose()
    await close_redis()


app = FastAPI(
    title="Ref API",
    description="Backend API for Ref - dating through friends and matchmakers",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.debug(
        "{} {} -> {} ({:.1f} ms)",
        request.method, request.url.path, response.status_code, elapsed_ms,
    )
    return response


# --- Error handlers ---

@app.exception_handler(RefError)
async def ref_error_handler(request: Request, exc: RefError):
    if exc.status_code >= 500:
        logger.warning("{} {} failed: {}", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Render body validation failures as 400 with per-field messages."""
    field_errors: dict[str, list[str]] = {}
    form_errors: list[str] = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part != "body"]
        if loc:
            field_errors.setdefault(".".join(loc), []).append(err["msg"])
        else:
            form_errors.append(err["msg"])
    return JSONResponse(
        status_code=400,
        content={"error": {"formErrors": form_errors, "fieldErrors": field_errors}},
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on {} {}", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


# --- Routes ---
from refmatch.api.routes import (  # noqa: E402
    auth, chats, discovery, friends, matches, matchmaker, profiles, swipes,
)

app.include_router(auth.router, prefix="/auth", tags=["auth"])
app.include_router(profiles.router, prefix="/profiles", tags=["profiles"])
app.include_router(discovery.router, prefix="/discovery", tags=["discovery"])
app.include_router(swipes.router, prefix="/swipes", tags=["swipes"])
app.include_router(matches.router, prefix="/matches", tags=["matches"])
app.include_router(friends.router, prefix="/friends", tags=["friends"])
app.include_router(matchmaker.router, tags=["matchmaker"])
app.include_router(chats.router, prefix="/chats", tags=["chats"])


@app.get("/health")
async def health_check():
    return {"ok": True, "service": "refmatch"}
