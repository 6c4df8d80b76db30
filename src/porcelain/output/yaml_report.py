"""YAML reporter — same document as the JSON one, easier to read by eye."""

from __future__ import annotations

import yaml

from porcelain.git.models import StatusSnapshot
from porcelain.output.json_report import to_dict


def render(snapshot: StatusSnapshot) -> str:
    """Return the snapshot as a YAML document."""
    return yaml.safe_dump(to_dict(snapshot), sort_keys=False, allow_unicode=True)
