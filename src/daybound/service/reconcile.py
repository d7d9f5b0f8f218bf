# SPDX-License-Identifier: MIT

"""
Positional reconciliation of rendered event lines into an existing document.

Every line the recognizer accepts is a slot. Slots are overwritten in order
by the new lines, surplus slots are removed and surplus new lines are
inserted right after the last slot. Lines that are not event lines are
never modified and keep their relative order.
"""

import logging
from typing import Optional

from daybound.model.document import Document
from daybound.model.reconcile import ReconcileResult
from daybound.service.render import is_event_line

logger = logging.getLogger(__name__)


def find_event_slots(lines: list[str]) -> list[int]:
    return [index for index, line in enumerate(lines) if is_event_line(line)]


def reconcile(
    new_lines: list[str], document_lines: list[str]
) -> Optional[ReconcileResult]:
    """
    Splice new event lines into the event slots of a document.

    Args:
        new_lines: Rendered event lines in display order. Lines the
            recognizer does not accept are ignored.
        document_lines: The current document, one entry per line

    Returns:
        The reconciled lines with replace/delete/insert counts, or None when
        the document holds no event lines and the caller should append
        instead
    """
    event_lines = []
    for line in new_lines:
        if is_event_line(line):
            event_lines.append(line)
        else:
            logger.warning("ignoring unrecognized event line: %r", line)

    slots = find_event_slots(document_lines)
    if len(slots) == 0:
        logger.info("no existing event lines, document left untouched")
        return None

    replacements: dict[int, str] = {}
    skip: set[int] = set()
    for position, line_index in enumerate(slots):
        if position < len(event_lines):
            logger.debug("replace line %d", line_index)
            replacements[line_index] = event_lines[position]
        else:
            logger.debug("delete line %d", line_index)
            skip.add(line_index)

    deleted = len(skip)
    if deleted > 0:
        # The blank line that introduced the block is orphaned once the block shrinks
        before_first = slots[0] - 1
        if before_first >= 0 and document_lines[before_first].strip() == "":
            logger.debug("collapse blank line %d", before_first)
            skip.add(before_first)

    extras = event_lines[len(slots) :]
    last_slot = slots[-1]

    result: list[str] = []
    for line_index, line in enumerate(document_lines):
        if line_index in skip:
            continue
        result.append(replacements.get(line_index, line))
        if line_index == last_slot and len(extras) > 0:
            logger.debug("insert %d lines after line %d", len(extras), line_index)
            result.extend(extras)

    return {
        "lines": result,
        "replaced": len(replacements),
        "deleted": deleted,
        "added": len(extras),
    }


def apply_to_document(
    new_lines: list[str], document: Document
) -> Optional[tuple[Document, ReconcileResult]]:
    result = reconcile(new_lines, document["lines"])
    if result is None:
        return None
    updated: Document = {
        "path": document["path"],
        "lines": result["lines"],
        "trailing_newline": document["trailing_newline"],
        "newline": document["newline"],
    }
    return updated, result


def append_to_document(new_lines: list[str], document: Document) -> Document:
    """Append an event block to a document that has none yet."""
    if len(new_lines) == 0:
        return document

    lines = list(document["lines"])
    if len(lines) > 0 and lines[-1].strip() != "":
        lines.append("")
    lines.extend(new_lines)
    return {
        "path": document["path"],
        "lines": lines,
        # A new file gets the usual trailing newline
        "trailing_newline": document["trailing_newline"] or len(document["lines"]) == 0,
        "newline": document["newline"],
    }


def summarize(result: ReconcileResult) -> str:
    return (
        f"{result['replaced']} updated, {result['deleted']} deleted, "
        f"{result['added']} added"
    )
