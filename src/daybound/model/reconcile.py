# SPDX-License-Identifier: MIT

from typing import TypedDict


class ReconcileResult(TypedDict):
    lines: list[str]
    replaced: int
    deleted: int
    added: int
