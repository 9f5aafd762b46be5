"""
목적:
- Markdown 문서를 한 번만 훑어 펜스 코드 블록 레코드 목록을 만든다.

설명:
- 스캐너 상태는 `OUTSIDE`/`IN_FENCE` 두 가지다.
- 펜스 밖에서는 `## ` 제목(단계 키워드 포함 시)으로 phase를, `### ` 제목으로 section을 갱신한다.
- 펜스가 닫히는 즉시 PathResolver로 경로를 추론한다.
  경로가 있는 블록만 남기고 다음 순번(1부터 연속)을 부여한다.
- 문서 끝까지 닫히지 않은 펜스는 블록을 만들지 않는다.

디자인 패턴:
- 상태 기계(State Machine) + 단일 패스 스캐너(Single-pass Scanner).

참조:
- src_py/fencetree/extraction/path_resolver.py
- src_py/fencetree/contracts/block_models.py
- src_py/fencetree/config/models.py
"""

from __future__ import annotations

import logging
from enum import Enum

from fencetree.config.models import ExtractionConfig
from fencetree.contracts.block_models import FencedBlock
from fencetree.extraction.path_resolver import PathResolver, ResolutionContext
from fencetree.shared.conventions import (
    FENCE_MARKER,
    PHASE_HEADING_PREFIX,
    SECTION_HEADING_PREFIX,
    split_lines,
)

_logger = logging.getLogger(__name__)


class _ScanState(Enum):
    OUTSIDE = "outside"
    IN_FENCE = "in_fence"


class BlockExtractor:
    """펜스 코드 블록 추출기."""

    def __init__(
        self,
        config: ExtractionConfig | None = None,
        resolver: PathResolver | None = None,
    ) -> None:
        self._config = config or ExtractionConfig()
        self._resolver = resolver or PathResolver()

    def extract(self, document_text: str) -> list[FencedBlock]:
        """문서 텍스트에서 경로가 결정된 블록 목록을 문서 순서대로 반환한다."""
        lines = split_lines(document_text)
        blocks: list[FencedBlock] = []

        state = _ScanState.OUTSIDE
        phase = self._config.initial_phase
        section = ""
        previous_line = ""
        previous_non_blank_line = ""

        language_tag = self._config.default_language_tag
        body_lines: list[str] = []
        fence_start = 0
        fence_previous_line = ""
        fence_previous_non_blank_line = ""

        for line_num, line in enumerate(lines):
            stripped = line.strip()

            if state is _ScanState.IN_FENCE:
                if stripped == FENCE_MARKER:
                    state = _ScanState.OUTSIDE
                    _logger.debug("펜스 종료: line=%d, %d줄", line_num + 1, len(body_lines))
                    block = self._build_block(
                        sequence=len(blocks) + 1,
                        language_tag=language_tag,
                        body="".join(f"{body_line}\n" for body_line in body_lines),
                        phase=phase,
                        section=section,
                        context_window=self._context_window(lines, fence_start),
                        previous_line=fence_previous_line,
                        previous_non_blank_line=fence_previous_non_blank_line,
                    )
                    if block is not None:
                        blocks.append(block)
                else:
                    body_lines.append(line)
                continue

            if stripped.startswith(FENCE_MARKER):
                state = _ScanState.IN_FENCE
                language_tag = stripped[len(FENCE_MARKER):].strip() or self._config.default_language_tag
                body_lines = []
                fence_start = line_num
                fence_previous_line = previous_line
                fence_previous_non_blank_line = previous_non_blank_line
                _logger.debug("펜스 시작: line=%d, language=%s", line_num + 1, language_tag)
                continue

            if stripped.startswith(PHASE_HEADING_PREFIX):
                heading = stripped[len(PHASE_HEADING_PREFIX):].strip()
                if self._is_phase_heading(heading):
                    phase = heading
                    _logger.debug("단계 감지: %s", phase)
            elif stripped.startswith(SECTION_HEADING_PREFIX):
                section = stripped[len(SECTION_HEADING_PREFIX):].strip()
                _logger.debug("섹션 감지: %s", section)

            previous_line = line
            if stripped:
                previous_non_blank_line = stripped

        if state is _ScanState.IN_FENCE:
            _logger.debug("닫히지 않은 펜스 무시: line=%d", fence_start + 1)

        return blocks

    def _build_block(
        self,
        *,
        sequence: int,
        language_tag: str,
        body: str,
        phase: str,
        section: str,
        context_window: str,
        previous_line: str,
        previous_non_blank_line: str,
    ) -> FencedBlock | None:
        ctx = ResolutionContext(
            body=body,
            language_tag=language_tag,
            section=section,
            context_window=context_window,
            hint_scan_lines=self._config.hint_scan_lines,
        )
        path = self._resolver.resolve(ctx)
        if path is None:
            _logger.debug("경로 미결정 블록 제외: language=%s, section=%s", language_tag, section)
            return None

        _logger.debug("블록 추가: #%d %s", sequence, path)
        return FencedBlock(
            sequence=sequence,
            language_tag=language_tag,
            body=body,
            phase=phase,
            section=section,
            context_window=context_window,
            previous_line=previous_line,
            previous_non_blank_line=previous_non_blank_line,
            path=path,
        )

    def _is_phase_heading(self, heading: str) -> bool:
        upper = heading.upper()
        return any(keyword in upper for keyword in self._config.phase_keywords)

    def _context_window(self, lines: list[str], fence_start: int) -> str:
        count = self._config.context_window_lines
        if count == 0:
            return ""
        start = max(0, fence_start - count)
        return "".join(f"{line}\n" for line in lines[start:fence_start])


def extract_blocks(document_text: str, config: ExtractionConfig | None = None) -> list[FencedBlock]:
    """기본 PathResolver로 문서에서 블록을 추출한다."""
    return BlockExtractor(config=config).extract(document_text)
