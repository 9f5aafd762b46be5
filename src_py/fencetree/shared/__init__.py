"""
목적:
- 공통 규약 상수의 공개 심볼을 정의한다.

설명:
- 패키지 전역 규약을 중앙에서 재사용하기 위한 진입점이다.

디자인 패턴:
- 설정 객체(Configuration Object).

참조:
- src_py/fencetree/shared/conventions.py
"""

from .conventions import (
    DEFAULT_BASE_DIRECTORIES,
    FENCE_MARKER,
    PRIMARY_LANGUAGE_TAG,
    contains_test_marker,
    split_lines,
)

__all__ = [
    "DEFAULT_BASE_DIRECTORIES",
    "FENCE_MARKER",
    "PRIMARY_LANGUAGE_TAG",
    "contains_test_marker",
    "split_lines",
]
