import pytest

from fencetree.contracts.block_models import FencedBlock
from fencetree.contracts.block_types import BlockType
from fencetree.exceptions import CursorRangeError
from fencetree.review.cursor import (
    ReviewCursor,
    advance,
    filter_blocks,
    jump,
    pending_blocks,
    phases_in_order,
    retreat,
)


def _blocks() -> list[FencedBlock]:
    return [
        FencedBlock(sequence=1, phase="Phase 1", body="class A {}\n", path="src/main/java/a/A.java"),
        FencedBlock(sequence=2, phase="Phase 1", body="<project/>\n", path="pom.xml"),
        FencedBlock(sequence=3, phase="Phase 2", body="class ATest {}\n", path="src/test/java/a/ATest.java"),
        FencedBlock(sequence=4, phase="Phase 2", body="class B {}\n", path="src/main/java/a/B.java"),
        FencedBlock(sequence=5, phase="Phase 3", body="note\n"),
    ]


def test_advance_and_retreat_stop_at_edges() -> None:
    cursor = ReviewCursor(index=0, total=3)

    assert retreat(cursor) is cursor
    moved = advance(advance(cursor))
    assert moved.index == 2
    assert moved.at_last
    assert advance(moved) is moved
    assert retreat(moved).index == 1
    assert cursor.index == 0


def test_empty_cursor_is_at_both_edges() -> None:
    cursor = ReviewCursor()

    assert cursor.at_first
    assert cursor.at_last
    assert advance(cursor) is cursor


def test_jump_uses_one_based_numbers() -> None:
    cursor = jump(ReviewCursor(total=5), 4)

    assert cursor.index == 3
    assert cursor.number == 4


@pytest.mark.parametrize("number", [0, 6, -1])
def test_jump_out_of_range(number: int) -> None:
    with pytest.raises(CursorRangeError):
        jump(ReviewCursor(total=5), number)


def test_cursor_rejects_invalid_position() -> None:
    with pytest.raises(CursorRangeError):
        ReviewCursor(index=3, total=3)
    with pytest.raises(CursorRangeError):
        ReviewCursor(index=0, total=-1)


def test_pending_blocks_skip_generated_and_unresolved() -> None:
    pending = pending_blocks(_blocks(), {1, 3})

    assert [block.sequence for block in pending] == [2, 4]


def test_filter_by_type_and_phase() -> None:
    blocks = _blocks()

    assert [b.sequence for b in filter_blocks(blocks, block_type=BlockType.TEST_CODE)] == [3]
    assert [b.sequence for b in filter_blocks(blocks, phase="Phase 2")] == [3, 4]
    assert [b.sequence for b in filter_blocks(blocks, production_only=True)] == [1, 4]
    assert filter_blocks(blocks, block_type=BlockType.CONFIGURATION, phase="Phase 2") == []


def test_phases_in_order() -> None:
    assert phases_in_order(_blocks()) == ["Phase 1", "Phase 2", "Phase 3"]
