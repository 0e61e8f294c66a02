"""Scrub PII and credentials from request text before it reaches the logs."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

EMAIL_RE = re.compile(r"[\w.\-]+@[\w.\-]+\.\w+")
PHONE_RE = re.compile(r"(?<!\w)\+?1?[ -]?(?:\(\d{3}\)|\d{3})[ -]?\d{3}[ -]?\d{4}\b")
# key=value / key: value pairs where the key names a credential
SECRET_RE = re.compile(
    r"(?i)\b(\w*?(?:token|password|passwd|secret|auth[_-]?key)\w*)(\s*[:=]\s*)(['\"]?)[^\s'\"]+\3"
)


@dataclass
class Redactor:
    """Redact configured PII patterns from text."""

    enabled: bool = True
    patterns: Iterable[re.Pattern[str]] = (EMAIL_RE, PHONE_RE)
    replacement: str = "[REDACTED]"

    def redact(self, text: str) -> str:
        if not self.enabled:
            return text
        redacted = SECRET_RE.sub(lambda m: f"{m.group(1)}{m.group(2)}{self.replacement}", text)
        for pattern in self.patterns:
            redacted = pattern.sub(self.replacement, redacted)
        return redacted
