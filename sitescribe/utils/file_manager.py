"""
File Management Utilities

This module maps crawl routes onto the output tree and writes each page
twice: once as plain text and once as a Word document. Both files share the
same relative path under their own root.
"""

import logging
import os
import shutil
from pathlib import Path
from typing import Optional, Tuple

from ..core.converter import convert_html
from ..core.document_writer import DocumentWriter


# Output name for the site root route
ROOT_ROUTE_NAME = "index"


class FileManager:
    """
    Manages the ``txt`` and ``docx`` output directories of a crawl.

    Routes are trusted to be well-formed: their segments become nested
    directories as-is and ``..`` is not normalized away.
    """

    def __init__(self, base_output_dir: str = "data", document_writer: Optional[DocumentWriter] = None):
        """
        Initialize the file manager.

        Args:
            base_output_dir: Base directory for all output files
            document_writer: Writer used for .docx output
        """
        self.base_output_dir = Path(base_output_dir)
        self.txt_dir = self.base_output_dir / "txt"
        self.docx_dir = self.base_output_dir / "docx"
        self.document_writer = document_writer or DocumentWriter()
        self.logger = logging.getLogger(__name__)

    def reset_output_directory(self) -> bool:
        """
        Remove the whole output directory and recreate its structure.

        Returns:
            True if the directories are ready, False if clearing failed
        """
        try:
            if self.base_output_dir.exists():
                shutil.rmtree(self.base_output_dir)
            self.logger.info("Data folder cleared.")

            self.txt_dir.mkdir(parents=True, exist_ok=True)
            self.docx_dir.mkdir(parents=True, exist_ok=True)
            self.logger.info(f"Data folder structure created at: {self.base_output_dir.absolute()}")
            return True

        except OSError as e:
            self.logger.error(f"Error clearing or creating the data folder: {e}")
            return False

    @staticmethod
    def relative_path_from_route(route: str) -> str:
        """
        Derive the relative output path (without extension) for a route.

        ``/foo/bar`` and ``/foo/bar/`` both become ``foo/bar``. Empty
        segments are dropped and the site root ``/`` maps to ``index``.
        """
        segments = [segment for segment in route.split('/') if segment]
        if not segments:
            return ROOT_ROUTE_NAME
        return os.path.join(*segments)

    def get_file_paths(self, route: str) -> Tuple[str, str]:
        """
        Get the full file paths for text and document output.

        Args:
            route: Root-relative route

        Returns:
            Tuple of (txt_path, docx_path)
        """
        relative_path = self.relative_path_from_route(route)

        txt_path = os.path.join(str(self.txt_dir), f"{relative_path}.txt")
        docx_path = os.path.join(str(self.docx_dir), f"{relative_path}.docx")

        return txt_path, docx_path

    @staticmethod
    def build_header(base_url: str, route: str) -> str:
        return f"URL: {base_url}{route}"

    def save_content(self, route: str, content: str, base_url: str) -> Tuple[Optional[str], Optional[str]]:
        """
        Save sanitized page content as text and as a Word document.

        Args:
            route: Root-relative route of the page
            content: Sanitized markup
            base_url: Base URL of the crawl

        Returns:
            Tuple of (txt_path, docx_path); an entry is None if that write failed
        """
        txt_path, docx_path = self.get_file_paths(route)
        header = self.build_header(base_url, route)

        return self.save_text(txt_path, header, content), self.save_document(docx_path, header, content)

    def save_text(self, txt_path: str, header: str, content: str) -> Optional[str]:
        """Write the header, a blank line and the unconverted content."""
        try:
            os.makedirs(os.path.dirname(txt_path), exist_ok=True)

            with open(txt_path, 'w', encoding='utf-8') as f:
                f.write(f"{header}\n\n{content}")

            self.logger.info(f"Saved TXT content to: {txt_path}")
            return txt_path

        except Exception as e:
            self.logger.error(f"Error saving TXT content to {txt_path}: {e}")
            return None

    def save_document(self, docx_path: str, header: str, content: str) -> Optional[str]:
        """Convert the content to blocks and write them as a .docx file."""
        try:
            blocks = convert_html(content)
            self.document_writer.write_document(header, blocks, docx_path)

            self.logger.info(f"Saved DOCX content to: {docx_path}")
            return docx_path

        except Exception as e:
            self.logger.error(f"Error saving DOCX content to {docx_path}: {e}")
            return None
