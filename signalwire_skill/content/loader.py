"""Static load of a skill bundle directory.

Layout::

    SKILL.md                 root skill instructions (metadata header required)
    troubleshooting*.md      root troubleshooting guides
    reference/*.md
    patterns/*.md
    examples/*.md
    troubleshooting/*.md

Nested directories below a category directory keep that category.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from .. import metrics
from ..errors import ContentError, UnknownCategory
from ..frontmatter import split_frontmatter
from ..models import Category, Document, SkillMetadata

logger = logging.getLogger(__name__)

SKILL_FILE = "SKILL.md"
BUNDLED_ROOT = Path(__file__).resolve().parent.parent / "bundle"


@dataclass
class LoadedBundle:
    root: Path
    metadata: SkillMetadata
    documents: list[Document] = field(default_factory=list)
    # bundle-relative paths that were not loaded, with the reason
    skipped: list[tuple[str, str]] = field(default_factory=list)


def document_name(relative: Path) -> str:
    return relative.with_suffix("").as_posix()


def category_for(relative: Path) -> Category | None:
    """Return the category implied by a bundle-relative path, if any."""
    if len(relative.parts) == 1:
        if relative.stem.lower().startswith("troubleshooting"):
            return Category.TROUBLESHOOTING
        return Category.SKILL
    try:
        category = Category.parse(relative.parts[0])
    except UnknownCategory:
        return None
    # a "skill/" directory is not part of the layout
    return None if category is Category.SKILL else category


def load_bundle(root: str | Path | None = None) -> LoadedBundle:
    """Read every markdown document under ``root`` once.

    ``root`` defaults to the bundle shipped with the package. Raises
    :class:`ContentError` when the directory or its ``SKILL.md`` header is
    missing; unreadable or empty pages are skipped and reported.
    """
    root_path = Path(root) if root is not None else BUNDLED_ROOT
    if not root_path.is_dir():
        raise ContentError(f"bundle directory not found: {root_path}")

    skill_path = root_path / SKILL_FILE
    if not skill_path.is_file():
        raise ContentError(f"{SKILL_FILE} not found in {root_path}")

    with metrics.bundle_load_ms.time():
        header, skill_body = split_frontmatter(skill_path.read_text(encoding="utf-8"))
        if not header:
            raise ContentError(f"{SKILL_FILE} has no metadata header")
        bundle = LoadedBundle(root=root_path, metadata=SkillMetadata.from_header(header))

        for path in sorted(root_path.rglob("*.md")):
            relative = path.relative_to(root_path)
            if any(part.startswith(".") for part in relative.parts):
                continue
            _load_one(bundle, path, relative, skill_body if path == skill_path else None)

    metrics.documents_loaded.set(len(bundle.documents))
    logger.info(
        "bundle_loaded",
        extra={
            "event_type": "bundle_loaded",
            "document": str(root_path),
            "duration_ms": metrics.bundle_load_ms.last_ms,
        },
    )
    return bundle


def _load_one(bundle: LoadedBundle, path: Path, relative: Path, body: str | None) -> None:
    rel = relative.as_posix()
    category = category_for(relative)
    if category is None:
        _skip(bundle, rel, "not in a category directory")
        return

    if body is None:
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            _skip(bundle, rel, f"unreadable: {exc}")
            return
        try:
            _, body = split_frontmatter(text)
        except ContentError as exc:
            _skip(bundle, rel, str(exc))
            return

    if not body.strip():
        _skip(bundle, rel, "empty")
        return

    bundle.documents.append(
        Document(name=document_name(relative), category=category, body=body, path=path)
    )
    logger.debug("document_loaded", extra={"document": rel, "category": category.value})


def _skip(bundle: LoadedBundle, rel: str, reason: str) -> None:
    bundle.skipped.append((rel, reason))
    logger.warning(
        "document_skipped: %s (%s)", rel, reason, extra={"event_type": "document_skipped", "document": rel}
    )
