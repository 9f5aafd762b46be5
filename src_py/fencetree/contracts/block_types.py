"""
목적:
- 블록 유형(운영 코드/테스트 코드/설정/리소스/스크립트/기타)과 분류 함수를 정의한다.

설명:
- 유형은 저장하지 않고 (경로, 본문)에서 매번 다시 계산한다.
- 분류 규칙은 위에서부터 순서대로 적용되며 처음 일치한 유형을 반환한다.

디자인 패턴:
- 태그드 변형(Tagged Variant) + 순수 함수(Pure Function).

참조:
- src_py/fencetree/contracts/block_models.py
- src_py/fencetree/extraction/statistics.py
"""

from __future__ import annotations

from enum import Enum

from fencetree.shared.conventions import (
    CONFIG_EXTENSIONS,
    PRIMARY_EXTENSION,
    SCRIPT_EXTENSIONS,
    contains_test_marker,
)


class BlockType(str, Enum):
    """추출 블록 유형."""

    PRODUCTION_CODE = "production_code"
    TEST_CODE = "test_code"
    CONFIGURATION = "configuration"
    RESOURCE = "resource"
    SCRIPT = "script"
    OTHER = "other"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def short_code(self) -> str:
        return _SHORT_CODES[self]


_LABELS = {
    BlockType.PRODUCTION_CODE: "Production code",
    BlockType.TEST_CODE: "Test code",
    BlockType.CONFIGURATION: "Configuration",
    BlockType.RESOURCE: "Resource",
    BlockType.SCRIPT: "Script",
    BlockType.OTHER: "Other",
}

_SHORT_CODES = {
    BlockType.PRODUCTION_CODE: "PROD",
    BlockType.TEST_CODE: "TEST",
    BlockType.CONFIGURATION: "CONF",
    BlockType.RESOURCE: "RES",
    BlockType.SCRIPT: "SCR",
    BlockType.OTHER: "OTHER",
}

_TEST_FILE_SUFFIXES = ("test.java", "tests.java", "spec.java")


def classify_block(path: str | None, body: str = "") -> BlockType:
    """경로와 본문으로 블록 유형을 계산한다."""
    if not path:
        return BlockType.OTHER

    lowered = path.lower()
    file_name = lowered.rsplit("/", 1)[-1]
    is_java = lowered.endswith(PRIMARY_EXTENSION)

    if "/test/" in f"/{lowered}" or file_name.endswith(_TEST_FILE_SUFFIXES):
        return BlockType.TEST_CODE
    if is_java and contains_test_marker(body):
        return BlockType.TEST_CODE

    if lowered.endswith(CONFIG_EXTENSIONS):
        return BlockType.CONFIGURATION

    if (
        lowered.endswith(SCRIPT_EXTENSIONS)
        or file_name == "dockerfile"
        or file_name.startswith("docker-compose")
    ):
        return BlockType.SCRIPT

    if "/resources/" in lowered:
        return BlockType.RESOURCE

    if is_java:
        return BlockType.PRODUCTION_CODE
    return BlockType.OTHER
