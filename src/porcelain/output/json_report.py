"""JSON reporter for scripts and CI pipelines."""

from __future__ import annotations

import json
from typing import Any, Dict

from porcelain import __version__
from porcelain.git.models import StatusSnapshot


def to_dict(snapshot: StatusSnapshot) -> Dict[str, Any]:
    """Convert a StatusSnapshot to a JSON-serialisable dict."""
    return {
        "version": __version__,
        **snapshot.to_dict(),
        "counts": snapshot.counts(),
    }


def render(snapshot: StatusSnapshot) -> str:
    """Return formatted JSON string."""
    return json.dumps(to_dict(snapshot), indent=2)
