"""
事件模型（Event Model）

比對器預設不輸出任何東西到 stdout。
若需要取得「本次哪些目標字被哪個語音 token 滿足」等資訊，請使用事件回呼。
回呼拋出的例外只會被記錄，不會中斷比對。
"""

from __future__ import annotations

from typing import Callable, Literal, TypedDict


class MatchEvent(TypedDict, total=False):
    type: Literal["match", "auto_reveal", "complete"]
    trace_id: str

    # match / auto_reveal
    index: int
    target: str
    spoken: str
    rule: str
    score: float

    # complete
    target_length: int
    scored: bool


MatchEventHandler = Callable[[MatchEvent], None]
