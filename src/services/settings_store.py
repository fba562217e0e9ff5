"""
Settings store — agent.config.json read and partial update.

The monitoring service reads the same file and may keep keys of its own in it,
so updates are read-modify-write over the whole object and never drop keys
this module doesn't recognise.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from src.models.ipc import SettingsUpdate
from src.utils.json_store import AGENT_CONFIG_FILE, read_json, write_json

logger = logging.getLogger(__name__)


def get_settings_document(data_dir: Path) -> dict[str, Any]:
    """Return agent.config.json verbatim, or {} if it is missing or not an object."""
    raw = read_json(data_dir / AGENT_CONFIG_FILE)
    return raw if isinstance(raw, dict) else {}


def update_settings(data_dir: Path, update: SettingsUpdate) -> bool:
    """Merge the provided fields into agent.config.json, creating it if absent.

    Returns:
        True if the file was written, False on I/O or serialization failure.
    """
    config = get_settings_document(data_dir)
    changes = update.changes()
    config.update(changes)

    saved = write_json(data_dir / AGENT_CONFIG_FILE, config)
    if saved:
        logger.info(f"Updated settings: {', '.join(sorted(changes)) or 'no changes'}")
    return saved
