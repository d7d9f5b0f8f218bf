# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict


class EventLine(TypedDict):
    time: str
    color: Optional[str]
    title: str
