from __future__ import annotations

import logging
from dataclasses import dataclass

from .activation import Activation, ActivationMatcher
from .config import Settings, get_settings
from .content import ContentStore, load_bundle
from .models import SkillMetadata
from .redaction import Redactor
from .routing import RoutedContext, Router

log = logging.getLogger(__name__)


@dataclass
class Skill:
    """A loaded bundle with its matcher and router wired together."""

    metadata: SkillMetadata
    store: ContentStore
    matcher: ActivationMatcher
    router: Router

    def activate(self, text: str) -> Activation:
        return self.matcher.evaluate(text)

    def route(self, text: str) -> RoutedContext:
        return self.router.route(text)


def load_skill(settings: Settings | None = None) -> Skill:
    """Load the bundle named by ``settings`` and build a :class:`Skill`."""

    settings = settings or get_settings()
    bundle = load_bundle(settings.content_root)
    rule = bundle.metadata.rule.extend(settings.extra_triggers)
    if not len(rule):
        log.warning("skill %s has no activation triggers", bundle.metadata.name)

    store = ContentStore(bundle.documents)
    matcher = ActivationMatcher(
        rule,
        min_confidence=settings.min_confidence,
        redact=Redactor(enabled=settings.redact_requests).redact,
    )
    router = Router(store, matcher, max_documents=settings.max_documents)
    log.info("skill %s ready with %d documents", bundle.metadata.name, len(store))
    return Skill(metadata=bundle.metadata, store=store, matcher=matcher, router=router)
