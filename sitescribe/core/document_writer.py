"""
Word Document Generation Module

Renders a page header and its content blocks into a .docx document using
python-docx.
"""

import logging
import os
import re
from typing import Iterable

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Pt

from .converter import BlockKind, ContentBlock


BLOCK_SPACING = Pt(10)
LIST_ITEM_SPACING = Pt(5)

BULLET_STYLE = 'List Bullet'
# Decimal "1." numbering, one sequence shared by every ordered list in the document
NUMBERED_STYLE = 'List Number'

# Characters XML 1.0 cannot hold; python-docx rejects runs containing them
_XML_ILLEGAL = re.compile('[\x00-\x08\x0b\x0c\x0e-\x1f\ufffe\uffff]')


def xml_safe(text: str) -> str:
    return _XML_ILLEGAL.sub('', text)


class DocumentWriter:
    """Builds and saves Word documents from content blocks."""

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def build_document(self, header: str, blocks: Iterable[ContentBlock]):
        """
        Build a document with a bold header line followed by the blocks.

        Args:
            header: Text of the first paragraph, rendered bold
            blocks: Content blocks in document order

        Returns:
            A python-docx ``Document``
        """
        doc = Document()

        header_paragraph = doc.add_paragraph()
        header_run = header_paragraph.add_run(xml_safe(header))
        header_run.bold = True
        header_paragraph.paragraph_format.space_after = BLOCK_SPACING

        for block in blocks:
            self._add_block(doc, block)

        return doc

    def write_document(self, header: str, blocks: Iterable[ContentBlock], output_path: str) -> str:
        """
        Build a document and save it to ``output_path``.

        Parent directories are created as needed. Errors propagate to the
        caller.

        Returns:
            The path written
        """
        os.makedirs(os.path.dirname(os.path.abspath(output_path)), exist_ok=True)
        doc = self.build_document(header, blocks)
        doc.save(output_path)
        self.logger.debug(f"Document saved: {output_path}")
        return output_path

    def _add_block(self, doc, block: ContentBlock) -> None:
        if block.kind == BlockKind.HEADING:
            paragraph = doc.add_heading(xml_safe(block.text), level=block.level)
            paragraph.paragraph_format.space_after = BLOCK_SPACING

        elif block.kind == BlockKind.LIST_ITEM:
            style = NUMBERED_STYLE if block.ordered else BULLET_STYLE
            paragraph = doc.add_paragraph(style=style)
            paragraph.add_run(xml_safe(block.text))
            if block.ordered:
                paragraph.alignment = WD_ALIGN_PARAGRAPH.LEFT
            paragraph.paragraph_format.space_after = LIST_ITEM_SPACING

        else:
            # Paragraphs, links and images are a single plain run
            paragraph = doc.add_paragraph()
            paragraph.add_run(xml_safe(block.render()))
            paragraph.paragraph_format.space_after = BLOCK_SPACING
