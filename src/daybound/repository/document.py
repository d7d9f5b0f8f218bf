# SPDX-License-Identifier: MIT

import logging
from pathlib import Path
from typing import Optional

from daybound.errors import DocumentIOError
from daybound.model.document import Document

logger = logging.getLogger(__name__)

LF = "\n"
CRLF = "\r\n"


def detect_newline(text: str) -> str:
    """CRLF only when every line break in text is CRLF."""
    crlf_count = text.count(CRLF)
    if crlf_count > 0 and crlf_count == text.count(LF):
        return CRLF
    return LF


def document_from_text(text: str, path: Optional[Path] = None) -> Document:
    # Mixed line endings split on LF, lines keep their stray CR untouched
    newline = detect_newline(text)
    trailing_newline = text.endswith(newline)
    if trailing_newline:
        text = text[: -len(newline)]
    lines = text.split(newline) if text != "" or trailing_newline else []
    return {
        "path": path,
        "lines": lines,
        "trailing_newline": trailing_newline,
        "newline": newline,
    }


def document_to_text(document: Document) -> str:
    newline = document["newline"]
    text = newline.join(document["lines"])
    if document["trailing_newline"]:
        text += newline
    return text


class DocumentRepository:
    """Whole-file reads and writes of a markdown note, line endings kept as found."""

    def read(self, path: Path) -> Document:
        try:
            with path.open(encoding="utf-8", newline="") as note_file:
                text = note_file.read()
        except OSError as e:
            raise DocumentIOError(f"could not read {path}: {e}") from e
        document = document_from_text(text, path)
        logger.debug(
            "read %s (%d lines, %r)", path, len(document["lines"]), document["newline"]
        )
        return document

    def write(self, document: Document) -> None:
        path = document["path"]
        if path is None:
            raise DocumentIOError("document has no path to write to")
        text = document_to_text(document)
        try:
            with path.open("w", encoding="utf-8", newline="") as note_file:
                note_file.write(text)
        except OSError as e:
            raise DocumentIOError(f"could not write {path}: {e}") from e
        logger.debug("wrote %s (%d lines)", path, len(document["lines"]))


DOCUMENT_REPO = DocumentRepository()
