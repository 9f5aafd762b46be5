"""
목적:
- 문서에서 추출한 코드 블록 레코드 모델을 정의한다.

설명:
- 블록은 생성 후 변경되지 않는다. 본문 정규화는 새 레코드를 만든다.
- `path`가 None이면 목적지가 없는 블록이며 이후 단계에서 제외된다.
- 파생 값(유형/파일명/확장자)은 필드가 아니라 프로퍼티로 매번 계산한다.

디자인 패턴:
- 불변 DTO(Immutable Data Transfer Object).

참조:
- src_py/fencetree/extraction/block_extractor.py
- src_py/fencetree/contracts/block_types.py
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fencetree.contracts.block_types import BlockType, classify_block
from fencetree.shared.conventions import PRIMARY_EXTENSION, split_lines


class FencedBlock(BaseModel):
    """문서의 펜스 코드 블록 하나에 대한 레코드."""

    model_config = ConfigDict(frozen=True)

    sequence: int = Field(ge=1)
    language_tag: str = Field(default="text", min_length=1)
    body: str = Field(default="")
    phase: str = Field(default="Start")
    section: str = Field(default="")
    context_window: str = Field(default="")
    previous_line: str = Field(default="")
    previous_non_blank_line: str = Field(default="")
    path: str | None = Field(default=None)

    @field_validator("path")
    @classmethod
    def validate_path(cls, value: str | None) -> str | None:
        if value is None:
            return value
        if not value:
            raise ValueError("path는 빈 문자열일 수 없습니다")
        if value.startswith(("/", "\\")):
            raise ValueError(f"path는 경로 구분자로 시작할 수 없습니다: {value}")
        return value

    @property
    def derived_type(self) -> BlockType:
        return classify_block(self.path, self.body)

    @property
    def file_name(self) -> str:
        if self.path is None:
            return "unknown"
        return self.path.rsplit("/", 1)[-1]

    @property
    def extension(self) -> str:
        name = self.file_name
        if self.path is None or "." not in name:
            return ""
        return name.rsplit(".", 1)[-1]

    @property
    def line_count(self) -> int:
        return len(split_lines(self.body))

    @property
    def is_java(self) -> bool:
        return self.path is not None and self.path.endswith(PRIMARY_EXTENSION)

    @property
    def is_test(self) -> bool:
        return self.derived_type is BlockType.TEST_CODE

    def __str__(self) -> str:
        return f"[{self.sequence}] {self.phase} - {self.file_name} ({self.derived_type.short_code})"
