"""
OPSIS Control Panel - Local Command API

FastAPI application answering the control panel's commands by reading and
updating the JSON files the monitoring service keeps in the data directory.
"""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.config import get_settings
from src.models.ipc import (
    CommandResult,
    HealthData,
    ManualTicketRequest,
    RemovedCount,
    SettingsUpdate,
    Stats,
)
from src.services import health, settings_store, tickets

# Configure logging
logging.basicConfig(level=get_settings().resolved_log_level())
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="OPSIS Control Panel API",
    description="Local command surface for the OPSIS agent control panel",
    version="1.0.0"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # the control panel webview serves from a custom scheme
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================================
# Dependencies
# ============================================================================

def get_data_dir() -> Path:
    """Resolved data directory. Tests override this with a temporary directory."""
    return get_settings().resolve_data_dir()


# ============================================================================
# API Endpoints
# ============================================================================

@app.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "healthy", "service": "OPSIS Control Panel API", "version": "1.0.0"}


@app.get("/health")
def health_check(data_dir: Path = Depends(get_data_dir)):
    """Detailed health check."""
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "data_dir": str(data_dir),
        "data_dir_exists": data_dir.is_dir(),
    }


@app.get("/api/v1/stats", response_model=Stats)
def get_stats(data_dir: Path = Depends(get_data_dir)):
    """Ticket counters for the dashboard header."""
    return tickets.get_stats(data_dir)


@app.get("/api/v1/tickets", response_model=List[Any])
def get_tickets(data_dir: Path = Depends(get_data_dir)):
    """Up to 100 tickets, newest first as stored."""
    return tickets.get_tickets(data_dir)


@app.post("/api/v1/tickets/clear-old", response_model=RemovedCount)
def clear_old_tickets(data_dir: Path = Depends(get_data_dir)):
    """Drop tickets older than 24 hours."""
    return RemovedCount(removed=tickets.clear_old_tickets(data_dir))


@app.post("/api/v1/tickets/clear-all", response_model=RemovedCount)
def clear_all_tickets(data_dir: Path = Depends(get_data_dir)):
    """Empty the ticket log."""
    return RemovedCount(removed=tickets.clear_all_tickets(data_dir))


@app.post("/api/v1/tickets/manual", response_model=CommandResult)
def submit_manual_ticket(request: ManualTicketRequest, data_dir: Path = Depends(get_data_dir)):
    """
    File a ticket from the control panel's "report an issue" form.

    The ticket is prepended so it shows first in the ticket list.
    """
    return CommandResult(success=tickets.submit_manual_ticket(data_dir, request))


@app.get("/api/v1/settings", response_model=Dict[str, Any])
def get_settings_document(data_dir: Path = Depends(get_data_dir)):
    """agent.config.json as stored."""
    return settings_store.get_settings_document(data_dir)


@app.put("/api/v1/settings", response_model=CommandResult)
def update_settings(update: SettingsUpdate, data_dir: Path = Depends(get_data_dir)):
    """Merge the provided settings; omitted fields keep their stored values."""
    return CommandResult(success=settings_store.update_settings(data_dir, update))


@app.get("/api/v1/health-data", response_model=HealthData)
def get_health_data(data_dir: Path = Depends(get_data_dir)):
    """Resource health scores, detected patterns and pending proactive actions."""
    return health.get_health_data(data_dir)


# ============================================================================
# Main Entry Point
# ============================================================================

if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    logger.info(f"Serving data from {settings.resolve_data_dir()}")
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
