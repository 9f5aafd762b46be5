"""
목적:
- 단계별 검토 계층의 공개 심볼을 정의한다.

디자인 패턴:
- 퍼사드(Facade).

참조:
- src_py/fencetree/review/cursor.py
"""

from .cursor import (
    ReviewCursor,
    advance,
    filter_blocks,
    jump,
    pending_blocks,
    phases_in_order,
    retreat,
)

__all__ = [
    "ReviewCursor",
    "advance",
    "retreat",
    "jump",
    "pending_blocks",
    "filter_blocks",
    "phases_in_order",
]
