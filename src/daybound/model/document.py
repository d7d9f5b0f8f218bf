# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, TypedDict


class Document(TypedDict):
    path: Optional[Path]
    lines: list[str]
    trailing_newline: bool
    newline: str
