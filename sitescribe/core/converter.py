"""
HTML to Content Block Conversion

Turns sanitized markup into an ordered list of typed content blocks that the
document writer renders. Only the top-level children of the body are
inspected; lists get one extra pass over their items and everything nested
deeper is flattened into text.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from bs4 import BeautifulSoup, Comment, NavigableString, Tag
from bs4.element import CData, Declaration, Doctype, ProcessingInstruction


HEADING_TAGS = {'h1': 1, 'h2': 2, 'h3': 3}
PARAGRAPH_TAGS = ('p', 'div')

# Strings that are markup artifacts rather than page text
_NON_TEXT_STRINGS = (Comment, CData, Declaration, Doctype, ProcessingInstruction)


class BlockKind(Enum):
    HEADING = "heading"
    PARAGRAPH = "paragraph"
    LINK = "link"
    IMAGE = "image"
    LIST_ITEM = "list_item"


@dataclass(frozen=True)
class ContentBlock:
    kind: BlockKind
    text: str = ""
    level: int = 0
    href: Optional[str] = None
    src: Optional[str] = None
    ordered: bool = False

    def render(self) -> str:
        """Return the text shown for this block in a document."""
        if self.kind == BlockKind.LINK:
            return f"{self.text} ({self.href or ''})"
        if self.kind == BlockKind.IMAGE:
            return f"Image: {self.src or ''}"
        return self.text


def heading(text: str, level: int) -> ContentBlock:
    return ContentBlock(BlockKind.HEADING, text=text, level=level)


def paragraph(text: str) -> ContentBlock:
    return ContentBlock(BlockKind.PARAGRAPH, text=text)


def link(text: str, href: Optional[str]) -> ContentBlock:
    return ContentBlock(BlockKind.LINK, text=text, href=href)


def image(src: Optional[str]) -> ContentBlock:
    return ContentBlock(BlockKind.IMAGE, src=src)


def list_item(text: str, ordered: bool) -> ContentBlock:
    return ContentBlock(BlockKind.LIST_ITEM, text=text, ordered=ordered)


def convert_html(markup: str) -> List[ContentBlock]:
    """
    Convert sanitized markup into content blocks.

    Args:
        markup: Sanitized HTML, a fragment or a full document

    Returns:
        Blocks in source document order, list items expanded in place
    """
    if not markup:
        return []

    soup = BeautifulSoup(markup, 'html.parser')
    root = soup.body or soup

    blocks: List[ContentBlock] = []
    for node in root.children:
        blocks.extend(_convert_node(node))
    return blocks


def _convert_node(node) -> List[ContentBlock]:
    if isinstance(node, Tag):
        return _convert_tag(node)

    if isinstance(node, NavigableString) and not isinstance(node, _NON_TEXT_STRINGS):
        text = str(node).strip()
        if text:
            return [paragraph(text)]

    return []


def _convert_tag(tag: Tag) -> List[ContentBlock]:
    name = tag.name.lower()

    if name in HEADING_TAGS:
        return [heading(_text_of(tag), HEADING_TAGS[name])]

    if name in PARAGRAPH_TAGS:
        text = _text_of(tag)
        return [paragraph(text)] if text else []

    if name == 'a':
        return [link(_text_of(tag), tag.get('href'))]

    if name == 'img':
        return [image(tag.get('src'))]

    if name in ('ul', 'ol'):
        ordered = name == 'ol'
        items = []
        for item in tag.find_all('li'):
            text = _text_of(item)
            if text:
                items.append(list_item(text, ordered))
        return items

    return []


def _text_of(tag: Tag) -> str:
    """Concatenated descendant text, trimmed."""
    return tag.get_text().strip()
