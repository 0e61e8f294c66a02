from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass

from .. import metrics
from ..models import ActivationRule, TriggerTerm

logger = logging.getLogger(__name__)


def compile_term(term: str) -> re.Pattern[str]:
    """Case-insensitive substring pattern for ``term``.

    Words of a phrase may be separated by any run of whitespace.
    """
    body = r"\s+".join(re.escape(w) for w in term.split())
    return re.compile(body, re.IGNORECASE)


@dataclass(frozen=True)
class Activation:
    relevant: bool
    confidence: float
    matched: tuple[str, ...] = ()

    def __bool__(self) -> bool:
        return self.relevant

    def to_dict(self) -> dict:
        return {
            "relevant": self.relevant,
            "confidence": round(self.confidence, 4),
            "matched": list(self.matched),
        }


class ActivationMatcher:
    """Decide whether request text or code context concerns the SDK.

    Any matched trigger term makes the input relevant as long as the combined
    confidence reaches ``min_confidence``. Confidence combines the weights of
    the matched terms as independent signals: ``1 - prod(1 - w)``.
    """

    def __init__(
        self,
        rule: ActivationRule,
        min_confidence: float = 0.0,
        redact: Callable[[str], str] | None = None,
    ) -> None:
        if not 0.0 <= min_confidence <= 1.0:
            raise ValueError(f"min_confidence must be in [0, 1], got {min_confidence}")
        self.rule = rule
        self.min_confidence = min_confidence
        self.redact = redact
        self._patterns: list[tuple[TriggerTerm, re.Pattern[str]]] = [
            (t, compile_term(t.term)) for t in rule.terms
        ]

    def evaluate(self, text: str) -> Activation:
        metrics.activation_checks_total.inc()
        if not text or not text.strip():
            return Activation(relevant=False, confidence=0.0)

        matched: list[str] = []
        miss = 1.0
        for term, pattern in self._patterns:
            if pattern.search(text):
                matched.append(term.term)
                miss *= 1.0 - term.weight
        confidence = 1.0 - miss if matched else 0.0
        relevant = bool(matched) and confidence >= self.min_confidence
        if relevant:
            metrics.activations_total.inc()

        activation = Activation(relevant=relevant, confidence=confidence, matched=tuple(matched))
        logger.info(
            "activation_evaluated",
            extra={
                "event_type": "activation_evaluated",
                "confidence": activation.confidence,
                "matched_terms": list(activation.matched),
            },
        )
        if logger.isEnabledFor(logging.DEBUG):
            shown = self.redact(text) if self.redact else text
            logger.debug("activation_request: %s", shown[:500])
        return activation

    def is_relevant(self, text: str) -> bool:
        return self.evaluate(text).relevant
