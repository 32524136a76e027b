"""
FastAPI application - Main entry point
"""

from dotenv import load_dotenv

load_dotenv()

import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles

from src.catalog.audio import AudioTrack, check_track
from src.catalog.display import DisplayRegion
from src.catalog.page import render_page
from src.catalog.pipeline import CatalogClient, FetchPipeline
from src.catalog.registry import all_bindings, binding_for_trigger, make_handler
from src.error_handler import ErrorHandler
from src.integrations.clients import build_client
from src.integrations.contracts.catalog import UnknownTrigger
from src.utils.config_loader import load_catalog_config

# Setup logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).parent.parent.parent
STATIC_DIR = PROJECT_ROOT / "static"

# Initialize FastAPI app
app = FastAPI(
    title="CS2 Item Catalog",
    description="Browse CSGO-API item catalogs rendered as cards",
    version="1.0.0",
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

# ============================================================================
# DEPENDENCY INJECTION
# ============================================================================

catalog_cfg = load_catalog_config(Path(os.environ["CATALOG_CONFIG"]) if os.getenv("CATALOG_CONFIG") else None)
catalog_client = build_client(catalog_cfg, root=PROJECT_ROOT)
error_handler = ErrorHandler()
audio_track = AudioTrack.from_config(catalog_cfg.audio)


def get_catalog_client() -> CatalogClient:
    return catalog_client


api_router = APIRouter()


# ============================================================================
# ENDPOINTS
# ============================================================================
@app.get("/", response_class=HTMLResponse, tags=["Page"])
async def index():
    """Catalog page: trigger buttons, empty display region, ambient audio."""
    return HTMLResponse(render_page(audio_track))


@app.get("/health", tags=["Health"])
async def health_check():
    return {
        "status": "healthy",
        "catalog_source": catalog_cfg.api.source,
        "timestamp": datetime.now().isoformat(),
    }


@api_router.get("/categories", tags=["Catalog"])
async def list_categories() -> List[Dict[str, Any]]:
    return [
        {
            "category": b.category.value,
            "label": b.category.label,
            "trigger_id": b.trigger_id,
            "endpoint": b.endpoint,
            "card_class": b.template.css_class,
        }
        for b in all_bindings()
    ]


@api_router.get("/catalog/{trigger_id}", response_class=HTMLResponse, tags=["Catalog"])
async def fetch_catalog(trigger_id: str, client: CatalogClient = Depends(get_catalog_client)):
    """Fetch one category and return the rendered display region contents.

    Fetch failures are rendered as the region's error line, so this always
    answers 200 for a known trigger.
    """
    try:
        binding = binding_for_trigger(trigger_id)
    except UnknownTrigger:
        raise HTTPException(status_code=404, detail=f"Unknown trigger: {trigger_id}")

    region = DisplayRegion()
    pipeline = FetchPipeline(client, error_handler=error_handler)
    outcome = await make_handler(binding, pipeline, region)()
    logger.info(
        "Rendered %s: ok=%s cards=%d",
        trigger_id,
        outcome.ok,
        len(outcome.items) if outcome.ok else 0,
    )
    return HTMLResponse(region.inner_html())


app.include_router(api_router, prefix="/api/v1")


# ============================================================================
# STARTUP/SHUTDOWN EVENTS
# ============================================================================
@app.on_event("startup")
async def startup_event():
    logger.info("Starting CS2 Item Catalog (%d categories)...", len(all_bindings()))
    check_track(audio_track, STATIC_DIR)


@app.on_event("shutdown")
async def shutdown_event():
    logger.info("Shutting down CS2 Item Catalog...")
