# app.py
# FastAPI backend for "Desenrola Direito"
# - In-memory storage of categories, articles, solutions and users
# - Seeded once at startup from the built-in catalog
# - Thin JSON routes; the storage object is the only owner of state

import os
import logging
from contextlib import asynccontextmanager

import structlog
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from seed import seed_default
from stores import MemStorage
from utils import env_flag

load_dotenv()

# ----------------------------
# Environment & settings
# ----------------------------

FRONT_ORIGIN = os.getenv("FRONT_ORIGIN", "http://localhost:5173")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# --- Configure structlog + stdlib logging
_level = getattr(logging, LOG_LEVEL, logging.INFO)
logging.basicConfig(format="%(message)s", level=_level)
structlog.configure(
    wrapper_class=structlog.make_filtering_bound_logger(_level),
    processors=[structlog.processors.TimeStamper(fmt="iso"), structlog.processors.JSONRenderer()],
)
logger = structlog.get_logger("app")


# ----------------------------
# Config knobs (tunable)
# ----------------------------

class Settings(BaseModel):
    # Reject duplicate slugs/usernames instead of storing them silently
    enforce_unique_keys: bool = False

    # Reject articles whose category_id is unknown
    strict_category_refs: bool = True

    # Populate the store from the built-in catalog on startup
    seed_on_startup: bool = True

    # Default page size for /api/articles/recent
    recent_articles_default: int = Field(3, ge=0)


def load_settings() -> Settings:
    return Settings(
        enforce_unique_keys=env_flag(os.getenv("ENFORCE_UNIQUE_KEYS"), False),
        strict_category_refs=env_flag(os.getenv("STRICT_CATEGORY_REFS"), True),
        seed_on_startup=env_flag(os.getenv("SEED_ON_STARTUP"), True),
        recent_articles_default=int(os.getenv("RECENT_ARTICLES_DEFAULT", "3")),
    )


settings = load_settings()


async def build_storage(cfg: Settings) -> MemStorage:
    """Create the process-wide store and seed it once."""
    storage = MemStorage(
        enforce_unique_keys=cfg.enforce_unique_keys,
        strict_category_refs=cfg.strict_category_refs,
    )
    if cfg.seed_on_startup:
        await seed_default(storage)
    return storage


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.settings = settings
    app.state.storage = await build_storage(settings)
    logger.info("Desenrola Direito backend ready", seeded=settings.seed_on_startup)
    yield


# ----------------------------
# FastAPI app
# ----------------------------
from routes.health import router as health_router
from routes.categories import router as categories_router
from routes.articles import router as articles_router
from routes.solutions import router as solutions_router
from routes.users import router as users_router
from routes.docs import router as docs_router
app = FastAPI(title="Desenrola Direito — Backend", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[FRONT_ORIGIN],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router)
app.include_router(categories_router)
app.include_router(articles_router)
app.include_router(solutions_router)
app.include_router(users_router)
app.include_router(docs_router)
