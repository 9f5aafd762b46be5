"""
목적:
- fencetree Python 패키지의 공개 진입점을 제공한다.

설명:
- Markdown 문서의 펜스 코드 블록을 추출하고 목적지 경로를 추론해 소스 트리로 기록한다.
- 핵심 클래스는 `MarkdownProjectGenerator` 하나이며,
  단계별 구성요소(추출기/경로 추론기/정규화/작성기)와 설정/모델/예외를 함께 노출한다.

디자인 패턴:
- 퍼사드(Facade).

참조:
- src_py/fencetree/generation/generator.py
- src_py/fencetree/extraction/block_extractor.py
"""

from .config.models import ExtractionConfig, GeneratorConfig, OutputConfig
from .contracts.block_models import FencedBlock
from .contracts.block_types import BlockType, classify_block
from .contracts.generation_models import (
    BlockFailure,
    GenerationResult,
    ParseStats,
    PhaseSummary,
)
from .exceptions import (
    BlockWriteError,
    ConfigurationError,
    CursorRangeError,
    FencetreeError,
    SourceDocumentError,
)
from .extraction.block_extractor import BlockExtractor, extract_blocks
from .extraction.path_resolver import PathResolver, ResolutionContext, resolve_path
from .extraction.statistics import group_by_phase, summarize_blocks
from .generation.generator import MarkdownProjectGenerator
from .generation.writer import ProjectWriter
from .normalization.content_normalizer import normalize_block, normalize_body
from .review.cursor import ReviewCursor
from .version import __version__

__all__ = [
    "__version__",
    "MarkdownProjectGenerator",
    "BlockExtractor",
    "PathResolver",
    "ProjectWriter",
    "ResolutionContext",
    "ReviewCursor",
    "extract_blocks",
    "resolve_path",
    "normalize_body",
    "normalize_block",
    "summarize_blocks",
    "group_by_phase",
    "classify_block",
    "GeneratorConfig",
    "ExtractionConfig",
    "OutputConfig",
    "FencedBlock",
    "BlockType",
    "ParseStats",
    "PhaseSummary",
    "BlockFailure",
    "GenerationResult",
    "FencetreeError",
    "ConfigurationError",
    "SourceDocumentError",
    "BlockWriteError",
    "CursorRangeError",
]
