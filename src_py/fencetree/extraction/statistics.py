"""
목적:
- 최종 블록 목록의 요약 통계를 계산한다.

설명:
- 통계는 별도로 누적/변경되는 상태가 아니라 블록 목록을 훑어서 만드는 읽기 전용 값이다.

디자인 패턴:
- 함수형 유틸 모듈(Function Utility Module).

참조:
- src_py/fencetree/contracts/generation_models.py
"""

from __future__ import annotations

from collections.abc import Iterable

from fencetree.contracts.block_models import FencedBlock
from fencetree.contracts.block_types import BlockType
from fencetree.contracts.generation_models import ParseStats, PhaseSummary

_CONFIG_FILE_EXTENSIONS = (".xml", ".yml", ".yaml", ".properties")


def summarize_blocks(blocks: Iterable[FencedBlock]) -> ParseStats:
    """블록 목록에서 파일 유형별 건수와 총 줄 수를 계산한다."""
    total = java = tests = config = other = lines = 0
    for block in blocks:
        total += 1
        lines += block.line_count
        block_type = block.derived_type
        if block.is_java:
            java += 1
            if block_type is BlockType.TEST_CODE:
                tests += 1
        elif block.path is not None and block.path.endswith(_CONFIG_FILE_EXTENSIONS):
            config += 1
        else:
            other += 1

    return ParseStats(
        total_blocks=total,
        java_files=java,
        test_files=tests,
        config_files=config,
        other_files=other,
        total_lines=lines,
    )


def group_by_phase(blocks: Iterable[FencedBlock]) -> list[PhaseSummary]:
    """단계(phase)별 운영/테스트/설정 블록 건수를 등장 순서대로 반환한다."""
    counts: dict[str, dict[str, int]] = {}
    for block in blocks:
        bucket = counts.setdefault(block.phase, {"production": 0, "tests": 0, "config": 0})
        block_type = block.derived_type
        if block_type is BlockType.TEST_CODE:
            bucket["tests"] += 1
        elif block.is_java:
            bucket["production"] += 1
        if block.path is not None and block.path.endswith(_CONFIG_FILE_EXTENSIONS):
            bucket["config"] += 1

    return [PhaseSummary(phase=phase, **bucket) for phase, bucket in counts.items()]
