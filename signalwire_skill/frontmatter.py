"""Split a YAML metadata header from a markdown body.

A header is a YAML mapping between two ``---`` lines at the very top of the
file::

    ---
    name: signalwire-agents
    description: Build voice AI agents with the SignalWire AI Agents SDK
    triggers: [AgentBase, SWAIG, SWML]
    ---
    # SignalWire AI Agents
"""

from __future__ import annotations

import logging
from typing import Any

import yaml

from .errors import ContentError

logger = logging.getLogger(__name__)

_DELIMITER = "---"


def split_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    """Return ``(header, body)``.

    Text without a header yields ``({}, text)``. A header that opens but never
    closes, or whose YAML is not a mapping, raises :class:`ContentError`.
    """
    stripped = text.lstrip("\ufeff")
    lines = stripped.splitlines(keepends=True)
    if not lines or lines[0].strip() != _DELIMITER:
        return {}, text

    for idx in range(1, len(lines)):
        if lines[idx].strip() == _DELIMITER:
            raw_header = "".join(lines[1:idx])
            body = "".join(lines[idx + 1 :])
            break
    else:
        raise ContentError("metadata header is not closed with '---'")

    try:
        header = yaml.safe_load(raw_header) or {}
    except yaml.YAMLError as exc:
        raise ContentError(f"invalid YAML in metadata header: {exc}") from exc

    if not isinstance(header, dict):
        raise ContentError("metadata header must be a YAML mapping")
    return header, body.lstrip("\n")
