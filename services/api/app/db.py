"""Demand storage.

In-memory store for local development and tests. All access goes through
the module-level functions below so a database backend can be dropped in
without touching the routers.
"""

from __future__ import annotations

import logging
import threading
import uuid
from datetime import datetime, timezone
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)

_OPTIONAL_FIELDS = ("category", "budget", "timeline", "cooperationType")

# ---------------------------------------------------------------------------
# In-memory store
# ---------------------------------------------------------------------------

_mem_demands: Dict[str, dict] = {}
_lock = threading.Lock()


class DuplicateDemandError(Exception):
    """A demand with the same title already exists."""

    def __init__(self, title: str, existing_id: str):
        super().__init__(f"Demand already exists: {title!r}")
        self.title = title
        self.existing_id = existing_id


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _uuid() -> str:
    return str(uuid.uuid4())


def _normalize_title(title: str) -> str:
    return " ".join(title.split()).casefold()


def create_demand(title: str, description: str, owner: str = "", **optional: Optional[str]) -> dict:
    """Store a demand. Titles are unique (case and whitespace insensitive)."""
    key = _normalize_title(title)
    with _lock:
        for existing in _mem_demands.values():
            if _normalize_title(existing["title"]) == key:
                raise DuplicateDemandError(title, existing["id"])
        did = _uuid()
        d = {
            "id": did,
            "title": title,
            "description": description,
            "owner": owner,
            "status": "open",
            "created_at": _now_iso(),
        }
        for name in _OPTIONAL_FIELDS:
            d[name] = optional.get(name) or None
        _mem_demands[did] = d
    logger.info("Created demand %s", did)
    return d


def get_demand(demand_id: str) -> Optional[dict]:
    return _mem_demands.get(demand_id)


def list_demands() -> List[dict]:
    return sorted(_mem_demands.values(), key=lambda d: d["created_at"], reverse=True)


def delete_demand(demand_id: str) -> bool:
    with _lock:
        return _mem_demands.pop(demand_id, None) is not None
