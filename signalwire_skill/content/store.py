from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from .. import metrics
from ..errors import DocumentNotFound, DuplicateDocument
from ..models import Category, Document
from .loader import load_bundle

logger = logging.getLogger(__name__)


class ContentStore:
    """Read-only collection of bundle documents, keyed by name.

    Names are bundle-relative paths without the ``.md`` suffix, e.g.
    ``reference/agent-base``. Lookups also accept the suffixed form.
    """

    def __init__(self, documents: Iterable[Document] = ()) -> None:
        self._documents: dict[str, Document] = {}
        for doc in documents:
            if doc.name in self._documents:
                raise DuplicateDocument(doc.name)
            self._documents[doc.name] = doc
        self._by_category: dict[Category, list[str]] = {c: [] for c in Category}
        for name in sorted(self._documents):
            self._by_category[self._documents[name].category].append(name)

    @classmethod
    def from_directory(cls, root: str | Path | None = None) -> ContentStore:
        return cls(load_bundle(root).documents)

    @staticmethod
    def _normalize(name: str) -> str:
        name = name.strip().replace("\\", "/").lstrip("/")
        if name.lower().endswith(".md"):
            name = name[:-3]
        return name

    def document(self, name: str) -> Document:
        """Return the document called ``name``.

        Raises :class:`DocumentNotFound` when it is not registered.
        """
        metrics.lookups_total.inc()
        doc = self._documents.get(self._normalize(name))
        if doc is None:
            metrics.lookup_misses_total.inc()
            logger.info(
                "document_missing",
                extra={"event_type": "document_missing", "document": name, "error_category": "lookup"},
            )
            raise DocumentNotFound(name)
        logger.debug(
            "document_lookup",
            extra={"event_type": "document_lookup", "document": doc.name, "category": doc.category.value},
        )
        return doc

    def get(self, name: str) -> str:
        """Return the body of ``name``."""
        return self.document(name).body

    def list(self, category: str | Category) -> list[str]:
        """Return the sorted names of documents tagged ``category``."""
        return list(self._by_category[Category.parse(category)])

    def documents(self, category: str | Category | None = None) -> list[Document]:
        if category is None:
            return [self._documents[n] for n in self.names()]
        return [self._documents[n] for n in self.list(category)]

    def names(self) -> list[str]:
        return sorted(self._documents)

    def categories(self) -> dict[Category, int]:
        """Document counts per category, including empty ones."""
        return {c: len(names) for c, names in self._by_category.items()}

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._normalize(name) in self._documents

    def __iter__(self) -> Iterator[Document]:
        return iter(self.documents())

    def __len__(self) -> int:
        return len(self._documents)
