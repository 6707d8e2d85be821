"""FastAPI application entry point."""

import os

import uvicorn
from ddtrace import patch
from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from travel_planner.dependencies import get_config
from travel_planner.logging import setup_logging
from travel_planner.routes import (
    expenses_router,
    llm_router,
    plans_router,
    voice_router,
)

patch(fastapi=True, sqlalchemy=True, redis=True, openai=True, raise_errors=False)

logger = setup_logging()

app = FastAPI(title="AI Travel Planner API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_config().server.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def error_body_handler(request: Request, exc: StarletteHTTPException):
    """Sends ``{"error", "details"}`` bodies as-is instead of under ``detail``."""
    if isinstance(exc.detail, dict):
        return JSONResponse(
            status_code=exc.status_code, content=exc.detail, headers=exc.headers
        )
    return await http_exception_handler(request, exc)


@app.get("/", response_class=PlainTextResponse)
def health() -> str:
    return "AI Travel Planner backend is running"


app.include_router(voice_router)
app.include_router(llm_router)
app.include_router(plans_router)
app.include_router(expenses_router)


def main():
    """Serves the API with uvicorn."""
    port = int(os.getenv("PORT", "3001"))
    logger.info("Starting travel planner API", extra={"port": port})
    uvicorn.run(app, host=os.getenv("HOST", "0.0.0.0"), port=port, log_config=None)


if __name__ == "__main__":
    main()
