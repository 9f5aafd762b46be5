"""
목적:
- 블록 단계별 검토에 쓰는 커서 값과 이동/필터 함수를 제공한다.

설명:
- 커서는 불변 값이다. 이동 함수는 새 커서를 반환하고 입력 커서를 바꾸지 않는다.
- 콘솔 메뉴/입력 루프는 이 모듈의 책임이 아니다. 소비자가 커서를 들고 다닌다.

디자인 패턴:
- 불변 값 객체(Immutable Value Object) + 순수 전이 함수(Pure Transition).

참조:
- src_py/fencetree/contracts/block_models.py
"""

from __future__ import annotations

from collections.abc import Collection, Iterable
from dataclasses import dataclass, replace

from fencetree.contracts.block_models import FencedBlock
from fencetree.contracts.block_types import BlockType
from fencetree.exceptions import CursorRangeError


@dataclass(frozen=True, slots=True)
class ReviewCursor:
    """검토 중인 블록 위치(0부터 시작)."""

    index: int = 0
    total: int = 0

    def __post_init__(self) -> None:
        if self.total < 0:
            raise CursorRangeError(f"total은 0 이상이어야 합니다: {self.total}")
        if self.total and not 0 <= self.index < self.total:
            raise CursorRangeError(f"index가 범위를 벗어났습니다: {self.index} (total={self.total})")

    @property
    def number(self) -> int:
        return self.index + 1

    @property
    def at_first(self) -> bool:
        return self.index == 0

    @property
    def at_last(self) -> bool:
        return self.total == 0 or self.index == self.total - 1


def advance(cursor: ReviewCursor) -> ReviewCursor:
    """다음 블록으로 이동한다. 마지막 블록이면 같은 위치를 반환한다."""
    if cursor.at_last:
        return cursor
    return replace(cursor, index=cursor.index + 1)


def retreat(cursor: ReviewCursor) -> ReviewCursor:
    """이전 블록으로 이동한다. 첫 블록이면 같은 위치를 반환한다."""
    if cursor.at_first:
        return cursor
    return replace(cursor, index=cursor.index - 1)


def jump(cursor: ReviewCursor, number: int) -> ReviewCursor:
    """1부터 시작하는 블록 번호로 이동한다."""
    if not 1 <= number <= cursor.total:
        raise CursorRangeError(f"블록 번호가 범위를 벗어났습니다: {number} (1-{cursor.total})")
    return replace(cursor, index=number - 1)


def pending_blocks(
    blocks: Iterable[FencedBlock],
    generated_sequences: Collection[int],
) -> list[FencedBlock]:
    """경로가 있고 아직 생성하지 않은 블록 목록을 반환한다."""
    return [
        block
        for block in blocks
        if block.path is not None and block.sequence not in generated_sequences
    ]


def filter_blocks(
    blocks: Iterable[FencedBlock],
    *,
    block_type: BlockType | None = None,
    phase: str | None = None,
    production_only: bool = False,
) -> list[FencedBlock]:
    """유형/단계/운영 코드 조건으로 블록을 거른다."""
    selected: list[FencedBlock] = []
    for block in blocks:
        if block_type is not None and block.derived_type is not block_type:
            continue
        if phase is not None and block.phase != phase:
            continue
        if production_only and (not block.is_java or block.is_test):
            continue
        selected.append(block)
    return selected


def phases_in_order(blocks: Iterable[FencedBlock]) -> list[str]:
    """등장 순서를 유지한 단계 이름 목록을 반환한다."""
    return list(dict.fromkeys(block.phase for block in blocks))
