"""
JSON file helpers for the shared data directory.

Reads are total: a missing file, unreadable file or malformed JSON all come
back as None and the caller decides the default. Writes are pretty-printed
UTF-8 and report success as a bool instead of raising.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional, TypeVar

from pydantic import BaseModel

logger = logging.getLogger(__name__)

TICKETS_FILE = "tickets.json"
AGENT_CONFIG_FILE = "agent.config.json"
STATE_TRACKER_FILE = "state-tracker.json"
PATTERN_DETECTOR_FILE = "pattern-detector.json"
PENDING_ACTIONS_FILE = "pending-actions.json"

_INDENT = 2

DocumentT = TypeVar("DocumentT", bound=BaseModel)


def read_json(path: Path) -> Optional[Any]:
    """Parse *path* as JSON. Returns None if it is absent, unreadable or malformed."""
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Cannot read {path}: {e}")
        return None

    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        logger.debug(f"Malformed JSON in {path}: {e}")
        return None


def load_document(path: Path, model: type[DocumentT]) -> DocumentT:
    """Read *path* into *model*; any failure yields the model's defaults.

    *model* must tolerate arbitrary input (see ExternalDocument).
    """
    return model.model_validate(read_json(path))


def write_json(path: Path, data: Any) -> bool:
    """Serialize *data* pretty-printed to *path*. Returns False on any failure.

    No rollback: a failed write leaves whatever the OS left on disk.
    """
    try:
        content = json.dumps(data, indent=_INDENT, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        logger.warning(f"Cannot serialize document for {path}: {e}")
        return False

    try:
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        logger.warning(f"Failed to write {path}: {e}")
        return False
    return True
