"""Server — FastAPI app creation, middleware, startup."""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from server.config import ALLOWED_ORIGINS, APP_VERSION, ENVIRONMENT, LOG_LEVEL

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

from planner.routes import router as planner_router
from tasks.routes import router as tasks_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"StudyFlow planner starting (environment={ENVIRONMENT})")
    yield
    logger.info("StudyFlow planner shutting down")

app = FastAPI(title="StudyFlow Planner API", version=APP_VERSION, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ─── API routes ──────────────────────────────────────────────
app.include_router(planner_router, tags=["schedule"])
app.include_router(tasks_router, tags=["tasks"])


@app.get("/health")
def health_check():
    return {"status": "ok", "version": APP_VERSION}
