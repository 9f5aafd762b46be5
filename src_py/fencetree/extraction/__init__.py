"""
목적:
- 블록 추출/경로 추론 계층의 공개 심볼을 정의한다.

설명:
- 문서 스캐너, 경로 추론기, 통계 함수를 외부에 노출한다.

디자인 패턴:
- 퍼사드(Facade).

참조:
- src_py/fencetree/extraction/block_extractor.py
- src_py/fencetree/extraction/path_resolver.py
- src_py/fencetree/extraction/statistics.py
"""

from .block_extractor import BlockExtractor, extract_blocks
from .path_resolver import (
    DEFAULT_STRATEGIES,
    PathResolver,
    ResolutionContext,
    resolve_path,
)
from .statistics import group_by_phase, summarize_blocks

__all__ = [
    "BlockExtractor",
    "extract_blocks",
    "PathResolver",
    "ResolutionContext",
    "DEFAULT_STRATEGIES",
    "resolve_path",
    "summarize_blocks",
    "group_by_phase",
]
