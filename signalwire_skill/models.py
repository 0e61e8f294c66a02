from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

from .errors import ContentError, UnknownCategory

_HEADING_RE = re.compile(r"^\s{0,3}#{1,6}\s+(.+?)\s*#*\s*$", re.MULTILINE)


class Category(str, Enum):
    SKILL = "skill"
    REFERENCE = "reference"
    PATTERN = "pattern"
    EXAMPLE = "example"
    TROUBLESHOOTING = "troubleshooting"

    @classmethod
    def parse(cls, value: str | Category) -> Category:
        """Return the category for ``value``.

        Matching ignores case and accepts the plural directory spelling
        (``patterns``, ``examples``).
        """
        if isinstance(value, Category):
            return value
        key = value.strip().lower()
        try:
            return cls(key)
        except ValueError:
            pass
        if key.endswith("s"):
            try:
                return cls(key[:-1])
            except ValueError:
                pass
        raise UnknownCategory(value)


@dataclass(frozen=True)
class Document:
    """One markdown page of the bundle."""

    name: str
    category: Category
    body: str
    path: Path | None = None
    title: str = ""

    def __post_init__(self) -> None:
        if not self.name:
            raise ContentError("document name must not be empty")
        if not self.body or not self.body.strip():
            raise ContentError(f"document {self.name!r} has an empty body")
        if not self.title:
            object.__setattr__(self, "title", extract_title(self.body) or self.name.rsplit("/", 1)[-1])


def extract_title(body: str) -> str | None:
    """Return the text of the first markdown heading in ``body``."""
    in_fence = False
    for line in body.splitlines():
        if line.lstrip().startswith("```"):
            in_fence = not in_fence
            continue
        if in_fence:
            continue
        match = _HEADING_RE.match(line)
        if match:
            return match.group(1)
    return None


@dataclass(frozen=True)
class TriggerTerm:
    term: str
    weight: float = 1.0

    def __post_init__(self) -> None:
        if not self.term.strip():
            raise ContentError("trigger term must not be empty")
        if not 0.0 < self.weight <= 1.0:
            raise ContentError(f"trigger {self.term!r} weight must be in (0, 1], got {self.weight}")

    @classmethod
    def coerce(cls, raw: Any) -> TriggerTerm:
        """Build a term from a header entry: a string or ``{term, weight}``."""
        if isinstance(raw, TriggerTerm):
            return raw
        if isinstance(raw, str):
            return cls(raw)
        if isinstance(raw, dict) and "term" in raw:
            try:
                weight = float(raw.get("weight", 1.0))
            except (TypeError, ValueError) as exc:
                raise ContentError(f"invalid trigger weight in {raw!r}") from exc
            return cls(str(raw["term"]), weight)
        raise ContentError(f"invalid trigger entry: {raw!r}")


@dataclass(frozen=True)
class ActivationRule:
    """The skill-wide trigger vocabulary."""

    terms: tuple[TriggerTerm, ...] = ()

    def extend(self, extra: list[str] | tuple[str, ...]) -> ActivationRule:
        """Return a rule with ``extra`` terms appended, skipping duplicates."""
        seen = {t.term.lower() for t in self.terms}
        added = []
        for term in extra:
            if term.strip() and term.lower() not in seen:
                seen.add(term.lower())
                added.append(TriggerTerm(term))
        return ActivationRule(self.terms + tuple(added))

    def __len__(self) -> int:
        return len(self.terms)


@dataclass(frozen=True)
class SkillMetadata:
    """Metadata header of the root ``SKILL.md``."""

    name: str
    description: str
    activation: str = ""
    version: str | None = None
    rule: ActivationRule = field(default_factory=ActivationRule)

    @classmethod
    def from_header(cls, header: dict[str, Any]) -> SkillMetadata:
        for key in ("name", "description"):
            if not isinstance(header.get(key), str) or not header[key].strip():
                raise ContentError(f"SKILL.md header is missing {key!r}")
        raw_triggers = header.get("triggers") or []
        if not isinstance(raw_triggers, list):
            raise ContentError("SKILL.md 'triggers' must be a list")
        version = header.get("version")
        return cls(
            name=header["name"].strip(),
            description=" ".join(header["description"].split()),
            activation=" ".join(str(header.get("activation") or "").split()),
            version=str(version) if version is not None else None,
            rule=ActivationRule(tuple(TriggerTerm.coerce(t) for t in raw_triggers)),
        )
