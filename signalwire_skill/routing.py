"""Choose which documents to surface once the skill is activated."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from .activation import Activation, ActivationMatcher
from .content import ContentStore
from .models import Category, Document

logger = logging.getLogger(__name__)

_WORD_RE = re.compile(r"[a-z0-9_]+")
# words too common in requests to say anything about a page
_STOPWORDS = frozenset(
    """
    a an and are as at be by can do does for from how i in is it its me my of on or
    so that the this to use using what when where which why with you your
    """.split()
)
_PHRASE_BONUS = 0.3


def _words(text: str) -> set[str]:
    words = set()
    for w in _WORD_RE.findall(text.lower()):
        if w in _STOPWORDS or len(w) < 2:
            continue
        words.add(w)
        # snake_case identifiers also count by their parts
        if "_" in w:
            words.update(p for p in w.split("_") if len(p) > 1 and p not in _STOPWORDS)
    return words


def score_document(query: str, doc: Document) -> float:
    """Keyword overlap between ``query`` and ``doc``.

    Words in the document title or name count double; the lowercased query
    appearing verbatim in the body adds a bonus. Zero means unrelated.
    """
    query_words = _words(query)
    if not query_words:
        return 0.0
    heading_words = _words(doc.title) | _words(doc.name.replace("/", " ").replace("-", " "))
    body_words = _words(doc.body)

    score = (len(query_words & heading_words) * 2 + len(query_words & body_words)) / len(query_words)
    if score and len(query.strip()) > 3 and query.strip().lower() in doc.body.lower():
        score += _PHRASE_BONUS
    return score


@dataclass(frozen=True)
class RoutedContext:
    activation: Activation
    documents: tuple[Document, ...] = field(default_factory=tuple)

    @property
    def names(self) -> list[str]:
        return [d.name for d in self.documents]

    def render(self) -> str:
        """Concatenate the surfaced documents for the consuming assistant."""
        parts = []
        for doc in self.documents:
            parts.append(f"<!-- {doc.name} ({doc.category.value}) -->\n{doc.body.strip()}\n")
        return "\n".join(parts)


class Router:
    def __init__(self, store: ContentStore, matcher: ActivationMatcher, max_documents: int = 5) -> None:
        if max_documents < 1:
            raise ValueError("max_documents must be at least 1")
        self.store = store
        self.matcher = matcher
        self.max_documents = max_documents

    def rank(self, text: str) -> list[tuple[Document, float]]:
        """Non-root documents with a positive score, best first, ties by name."""
        scored = [
            (doc, score_document(text, doc))
            for doc in self.store.documents()
            if doc.category is not Category.SKILL
        ]
        scored = [(doc, s) for doc, s in scored if s > 0]
        scored.sort(key=lambda item: (-item[1], item[0].name))
        return scored

    def route(self, text: str) -> RoutedContext:
        activation = self.matcher.evaluate(text)
        if not activation.relevant:
            return RoutedContext(activation=activation)

        selected = self.store.documents(Category.SKILL)[: self.max_documents]
        remaining = self.max_documents - len(selected)
        if remaining > 0:
            selected.extend(doc for doc, _ in self.rank(text)[:remaining])

        routed = RoutedContext(activation=activation, documents=tuple(selected))
        logger.info(
            "context_routed",
            extra={
                "event_type": "context_routed",
                "document": ",".join(routed.names),
                "confidence": activation.confidence,
            },
        )
        return routed
