"""
PDF text extraction
"""
from pathlib import Path
from typing import Union

from pypdf import PdfReader

from core.exceptions import DocumentParseError
from core.logger import get_logger

logger = get_logger(__name__)


class PDFProcessor:
    """Handles PDF text extraction."""

    @staticmethod
    def extract_text(file_path: Union[str, Path]) -> str:
        """Return the raw text of every page, one page per line block.

        The file is only read. Removing it is up to the caller.
        """
        try:
            reader = PdfReader(str(file_path))
            text_pages = [page.extract_text() or "" for page in reader.pages]
        except Exception as e:
            logger.debug("Failed to parse PDF %s: %r", file_path, e)
            raise DocumentParseError(f"Failed to extract text from PDF: {e}", original=e) from e

        logger.debug("Extracted %d page(s) from %s", len(text_pages), file_path)
        return "\n".join(text_pages)
