from __future__ import annotations

from pathlib import Path

SKILL_MD = """\
---
name: test-skill
description: Test bundle for the SignalWire agents skill
activation: Use when the request mentions AgentBase or SWAIG
triggers:
  - AgentBase
  - SWAIG
  - SWML
  - term: voice agent
    weight: 0.4
---
# Test skill

Subclass AgentBase and return SwaigFunctionResult from tools.
"""

DEFAULT_FILES = {
    "SKILL.md": SKILL_MD,
    "reference/agent-base.md": "# AgentBase\n\nConstructor, prompt methods and add_language.\n",
    "reference/swaig-functions.md": "# SWAIG functions\n\nDeclare tools with AgentBase.tool and parameters.\n",
    "patterns/tool-design.md": "# Tool design\n\nDescriptions say when to call a tool.\n",
    "examples/call-transfer.md": "# Transferring calls\n\nUse connect to transfer the caller to a department.\n",
    "troubleshooting/common-errors.md": "# Common errors\n\n401 Unauthorized means basic auth is wrong.\n",
    "troubleshooting-quickstart.md": "# Troubleshooting quickstart\n\nRun swaig-test first.\n",
}


def make_bundle(root: Path, files: dict[str, str | None] | None = None) -> Path:
    """Write a bundle under ``root``.

    ``files`` entries override the defaults; a ``None`` value drops a default
    file.
    """
    contents = dict(DEFAULT_FILES)
    contents.update(files or {})
    for rel, text in contents.items():
        if text is None:
            continue
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    return root
