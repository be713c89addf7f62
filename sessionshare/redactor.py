"""Secret scrubbing for sessionshare — applies the ordered rule table to text and JSON values."""

import re
from typing import Any, Sequence

from .rules import REDACTION_MARKER, RULES, Policy, Rule

__all__ = [
    "REDACTION_MARKER",
    "Redactor",
    "redact_text",
    "redact_value",
    "scrub",
    "scrub_deep",
]

# A kept prefix ending in one of these already separates key from value.
_SEPARATOR_END_RE = re.compile(r"""[=:'"\s]$""")
_TOKEN_CHARS_RE = re.compile(r"[\w\-+/=.]+", re.ASCII)


def _last_group(match: re.Match) -> int | None:
    for index in range(match.re.groups, 0, -1):
        if match.group(index) is not None:
            return index
    return None


class Redactor:
    """Applies an ordered sequence of rules, one full pass per rule."""

    def __init__(self, rules: Sequence[Rule] = RULES) -> None:
        self.rules = tuple(rules)

    def redact_text(self, text: Any) -> tuple[Any, int]:
        """Redact secrets in text.

        Returns:
            Tuple of (redacted text, number of redactions). Empty and
            non-string input comes back unchanged with a count of zero.
        """
        if not text or not isinstance(text, str):
            return text, 0

        count = 0
        for rule in self.rules:
            def _replace(match: re.Match, rule: Rule = rule) -> str:
                nonlocal count
                replacement = self._resolve(rule, match)
                if replacement is None:
                    return match.group(0)
                count += 1
                return replacement

            text = rule.pattern.sub(_replace, text)
        return text, count

    def redact_value(self, value: Any) -> tuple[Any, int]:
        """Redact every string inside a JSON-like value.

        Dict keys and non-string scalars are left alone. Containers are
        rebuilt, so the input is never modified.
        """
        if isinstance(value, str):
            return self.redact_text(value)
        if isinstance(value, dict):
            result = {}
            total = 0
            for key, item in value.items():
                result[key], count = self.redact_value(item)
                total += count
            return result, total
        if isinstance(value, (list, tuple)):
            items = []
            total = 0
            for item in value:
                scrubbed, count = self.redact_value(item)
                items.append(scrubbed)
                total += count
            return (tuple(items) if isinstance(value, tuple) else items), total
        return value, 0

    def scrub(self, text: Any) -> Any:
        return self.redact_text(text)[0]

    def scrub_deep(self, value: Any) -> Any:
        return self.redact_value(value)[0]

    def _resolve(self, rule: Rule, match: re.Match) -> str | None:
        """Replacement for one match, or None to leave it as is."""
        if rule.policy is Policy.BLOCK:
            return REDACTION_MARKER
        if rule.policy is Policy.PREFIX:
            return self._redact_last_group(rule, match)

        whole = match.group(0)
        if len(whole) >= rule.min_length and _TOKEN_CHARS_RE.fullmatch(whole):
            return REDACTION_MARKER
        return None

    def _redact_last_group(self, rule: Rule, match: re.Match) -> str | None:
        index = _last_group(match)
        if index is None:
            return None
        secret = match.group(index)
        if len(secret) < rule.min_length or REDACTION_MARKER in secret:
            return None

        text = match.string
        prefix = text[match.start():match.start(index)]
        if prefix and not _SEPARATOR_END_RE.search(prefix):
            prefix += "="
        return prefix + REDACTION_MARKER + text[match.end(index):match.end()]


_default_redactor = Redactor()


def redact_text(text: Any) -> tuple[Any, int]:
    return _default_redactor.redact_text(text)


def redact_value(value: Any) -> tuple[Any, int]:
    return _default_redactor.redact_value(value)


def scrub(text: Any) -> Any:
    """Return text with every detected secret replaced by the redaction marker."""
    return _default_redactor.scrub(text)


def scrub_deep(value: Any) -> Any:
    """Return a copy of a JSON-like value with every string leaf scrubbed."""
    return _default_redactor.scrub_deep(value)
