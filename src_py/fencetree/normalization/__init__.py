"""
목적:
- 본문 정규화 계층의 공개 심볼을 정의한다.

디자인 패턴:
- 퍼사드(Facade).

참조:
- src_py/fencetree/normalization/content_normalizer.py
"""

from .content_normalizer import normalize_block, normalize_blocks, normalize_body

__all__ = ["normalize_body", "normalize_block", "normalize_blocks"]
