# backend/app/main.py

import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# --- Setup Logging First ---
try:
    from app.core.logging_config import setup_logging

    setup_logging()
except ImportError as e_log_setup:
    print(
        f"--- CRITICAL: main.py - FAILED to import or run setup_logging: {e_log_setup} ---",
        flush=True,
    )
    sys.exit(1)

logger = logging.getLogger(__name__)

from app.api.v1.api_router import api_router as v1_api_router
from app.core.config import settings
from app.game_logic.world_ticker import start_world_ticker_task, stop_world_ticker_task
from app.websocket_router import router as ws_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    # --- STARTUP ---
    logger.info("--- Application Startup Initiated ---")
    start_world_ticker_task()
    logger.info("--- Application Startup Complete ---")

    yield

    # --- SHUTDOWN ---
    logger.info("--- Application Shutdown Initiated ---")
    stop_world_ticker_task()
    logger.info("--- Application Shutdown Complete ---")


# --- FASTAPI APP INITIALIZATION ---
app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan)
logger.info("FastAPI app instance created with lifespan manager.")

# --- MIDDLEWARE ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- ROUTERS ---
app.include_router(v1_api_router, prefix=settings.API_V1_STR)
app.include_router(ws_router)
logger.info("API and WebSocket routers included.")


# --- ROOT ENDPOINT ---
@app.get("/")
async def root():
    logger.debug("GET / request received.")
    return {"message": f"Welcome to {settings.PROJECT_NAME}. Mind the pits."}


logger.info("--- main.py configuration complete. Application is ready to run. ---")
