"""
HTML Sanitizer

Reduces untrusted HTML (pasted content, editor output, rendered Markdown)
to the tags and attributes the editing surfaces can produce. Executable
and embedded content is removed together with its subtree; any other
unknown tag is unwrapped so its text survives.
"""

import logging
from enum import Enum

import bleach
from bs4 import BeautifulSoup

from ..formats import ALLOWED_ATTRIBUTES, ALLOWED_PROTOCOLS, ALLOWED_TAGS

logger = logging.getLogger(__name__)


class TagPolicy(Enum):
    """What the sanitizer does with an element."""
    KEEP = "keep"
    UNWRAP = "unwrap"  # discard the tag, promote its children
    DROP = "drop"  # discard the tag and everything inside it


TAG_POLICIES: dict[str, TagPolicy] = {
    **{tag: TagPolicy.KEEP for tag in ALLOWED_TAGS},
    "script": TagPolicy.DROP,
    "style": TagPolicy.DROP,
    "iframe": TagPolicy.DROP,
    "frame": TagPolicy.DROP,
    "frameset": TagPolicy.DROP,
    "object": TagPolicy.DROP,
    "embed": TagPolicy.DROP,
    "applet": TagPolicy.DROP,
    "noscript": TagPolicy.DROP,
    "template": TagPolicy.DROP,
    "textarea": TagPolicy.DROP,
    "select": TagPolicy.DROP,
    "svg": TagPolicy.DROP,
    "math": TagPolicy.DROP,
    "head": TagPolicy.DROP,
    "title": TagPolicy.DROP,
}

DEFAULT_POLICY = TagPolicy.UNWRAP


def policy_for(tag_name: str) -> TagPolicy:
    return TAG_POLICIES.get(tag_name.lower(), DEFAULT_POLICY)


class HtmlSanitizer:
    """Allow-list sanitizer for structured markup."""

    def __init__(self, protocols=ALLOWED_PROTOCOLS):
        self.protocols = frozenset(protocols)
        self._tags = frozenset(t for t, p in TAG_POLICIES.items() if p is TagPolicy.KEEP)
        self._dropped = [t for t, p in TAG_POLICIES.items() if p is TagPolicy.DROP]

    def sanitize(self, raw: str) -> str:
        """
        Return sanitized HTML.

        Idempotent: sanitizing the result again yields the same string.
        """
        if not raw or not raw.strip():
            return ""

        html = self._drop_subtrees(raw)
        return bleach.clean(
            html,
            tags=self._tags,
            attributes=ALLOWED_ATTRIBUTES,
            protocols=self.protocols,
            strip=True,
            strip_comments=True,
        )

    __call__ = sanitize

    def _drop_subtrees(self, raw: str) -> str:
        soup = BeautifulSoup(raw, "html.parser")
        found = soup.find_all(self._dropped)
        if not found:
            return raw

        for tag in found:
            if not tag.decomposed:
                tag.decompose()
        logger.debug("Dropped %d executable/embedded element(s)", len(found))
        return str(soup)


_default_sanitizer = HtmlSanitizer()


def sanitize(raw: str) -> str:
    """Sanitize HTML with the default allow-lists."""
    return _default_sanitizer.sanitize(raw)
