"""
CAESAR TOOLKIT - FastAPI backend: cipher endpoint, health, languages, events.
"""

from contextlib import asynccontextmanager
from typing import Any, Dict, Optional

from fastapi import FastAPI, Query, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger
import uvicorn

from api.handler import describe_languages, handle_request
from core.config import settings
from core.monitors import ActivityMonitor
from cryptanalysis.languages import supported_languages


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"{settings.APP_NAME} {settings.APP_VERSION} starting")
    yield


app = FastAPI(title=settings.APP_NAME, version=settings.APP_VERSION, lifespan=lifespan)
app.add_middleware(CORSMiddleware, allow_origins=settings.CORS_ORIGINS, allow_methods=["*"], allow_headers=["*"])


@app.get("/")
def root() -> Dict[str, Any]:
    """API root: info and links."""
    return {
        "name": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": "/docs",
        "health": "/health",
        "caesar": "/api/caesar",
    }


@app.get("/health")
def health() -> Dict[str, Any]:
    return {"status": "ok", "languages": supported_languages()}


@app.get("/languages")
def languages() -> Dict[str, Any]:
    """Built-in language profiles usable in auto mode."""
    return {"languages": describe_languages()}


@app.post("/api/caesar")
async def caesar(request: Request) -> JSONResponse:
    """Encode, decode, ROT13, brute force or auto-decode. Body: {text, mode, shift?, language?}."""
    try:
        body = await request.json()
    except ValueError:
        return JSONResponse({"error": "Invalid JSON body"}, status_code=400)
    result = await run_in_threadpool(handle_request, body)
    return JSONResponse(result.payload, status_code=result.status_code)


@app.get("/events")
def get_events(n: int = Query(50, ge=1, le=500), mode: Optional[str] = Query(None)) -> Dict[str, Any]:
    """Poll recently handled requests."""
    monitor = ActivityMonitor()
    return {"events": monitor.get_recent(n, mode=mode), "counts": monitor.counts()}


if __name__ == "__main__":
    uvicorn.run("api.main:app", host=settings.API_HOST, port=settings.API_PORT, reload=False)
