"""
HTML Sanitizing Module

Reduces arbitrary markup to a fixed allow-list of structural tags and a
handful of link/image attributes. Everything else (scripts, styles,
comments, inline attributes and disallowed tags) is removed.
"""

import logging
from typing import Dict, FrozenSet

from bs4 import BeautifulSoup, Comment, Doctype, NavigableString, Tag
from bs4.element import CData, Declaration, ProcessingInstruction


ALLOWED_TAGS: FrozenSet[str] = frozenset(['p', 'h1', 'h2', 'h3', 'ul', 'ol', 'li', 'img'])

ALLOWED_ATTRIBUTES: Dict[str, FrozenSet[str]] = {
    'a': frozenset(['href']),
    'img': frozenset(['src', 'alt']),
}

# Removed together with their text content in every mode
BLANKED_TAGS: FrozenSet[str] = frozenset(['script', 'style', 'head', 'noscript', 'template'])

# Document wrappers are always unwrapped so a full page keeps its content
WRAPPER_TAGS: FrozenSet[str] = frozenset(['html', 'body'])

DISCARD = "discard"
UNWRAP = "unwrap"


class ContentSanitizer:
    """
    Allow-list sanitizer built on BeautifulSoup.

    In ``discard`` mode a disallowed tag is removed along with everything
    inside it. In ``unwrap`` mode the tag itself is dropped and its children
    are sanitized in its place.
    """

    def __init__(self, mode: str = DISCARD):
        if mode not in (DISCARD, UNWRAP):
            raise ValueError(f"Unknown disallowed tags mode: {mode}")
        self.mode = mode
        self.logger = logging.getLogger(__name__)

    def sanitize(self, markup: str) -> str:
        """
        Sanitize markup against the allow-list.

        Args:
            markup: Arbitrary HTML (a fragment or a full document)

        Returns:
            Markup containing only allowed tags and attributes
        """
        if not markup:
            return ""

        soup = BeautifulSoup(markup, 'html.parser')
        self._sanitize_children(soup)

        cleaned = str(soup)
        self.logger.debug(f"Sanitized markup: {len(markup)} -> {len(cleaned)} characters")
        return cleaned

    def _sanitize_children(self, parent: Tag) -> None:
        for node in list(parent.children):
            if isinstance(node, (Comment, CData, Doctype, Declaration, ProcessingInstruction)):
                node.extract()
            elif isinstance(node, NavigableString):
                continue
            elif isinstance(node, Tag):
                self._sanitize_tag(node)

    def _sanitize_tag(self, tag: Tag) -> None:
        name = tag.name.lower()

        if name in BLANKED_TAGS:
            tag.decompose()
            return

        if name in WRAPPER_TAGS:
            self._sanitize_children(tag)
            tag.unwrap()
            return

        if name not in ALLOWED_TAGS:
            if self.mode == UNWRAP:
                self._sanitize_children(tag)
                tag.unwrap()
            else:
                tag.decompose()
            return

        allowed = ALLOWED_ATTRIBUTES.get(name, frozenset())
        tag.attrs = {key: value for key, value in tag.attrs.items() if key in allowed}
        self._sanitize_children(tag)
