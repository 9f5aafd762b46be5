"""
목적:
- fencetree 라이브러리의 설정 인터페이스를 정의한다.

설명:
- 블록 추출(제목 키워드/문맥 창 크기)과 파일 생성(문서 파일명/기본 디렉터리) 값을
  단일 모델로 관리한다.
- 라이브러리는 환경 파일을 직접 읽지 않고, 외부에서 생성된 설정 객체를 주입받는다.

디자인 패턴:
- 값 객체(Value Object).

참조:
- scripts/run-generate.py
- src_py/fencetree/extraction/block_extractor.py
- src_py/fencetree/generation/writer.py
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import PurePosixPath

from pydantic import BaseModel, Field, ValidationError, field_validator

from fencetree.exceptions import ConfigurationError
from fencetree.shared.conventions import DEFAULT_BASE_DIRECTORIES


class ExtractionConfig(BaseModel):
    """문서 스캔/블록 추출 설정 모델."""

    phase_keywords: tuple[str, ...] = Field(default=("PHASE", "PART", "STEP", "FASE"))
    initial_phase: str = Field(default="Start", min_length=1)
    default_language_tag: str = Field(default="text", min_length=1)
    context_window_lines: int = Field(default=5, ge=0)
    hint_scan_lines: int = Field(default=5, ge=1)

    @field_validator("phase_keywords")
    @classmethod
    def validate_phase_keywords(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        keywords = tuple(keyword.strip().upper() for keyword in value if keyword.strip())
        if not keywords:
            raise ValueError("phase_keywords는 최소 1개 이상이어야 합니다")
        return keywords


class OutputConfig(BaseModel):
    """파일 생성 단계 설정 모델."""

    docs_filename: str = Field(default="README.md", min_length=1)
    base_directories: tuple[str, ...] = Field(default=DEFAULT_BASE_DIRECTORIES)
    encoding: str = Field(default="utf-8", min_length=1)

    @field_validator("docs_filename")
    @classmethod
    def validate_docs_filename(cls, value: str) -> str:
        if "/" in value or "\\" in value or value in {".", ".."}:
            raise ValueError("docs_filename은 디렉터리를 포함하지 않는 파일명이어야 합니다")
        return value

    @field_validator("base_directories")
    @classmethod
    def validate_base_directories(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        for directory in value:
            if not directory or PurePosixPath(directory).is_absolute():
                raise ValueError(f"base_directories 항목은 상대 경로여야 합니다: {directory!r}")
        return value


class GeneratorConfig(BaseModel):
    """추출/생성 전체 설정 모델."""

    extraction: ExtractionConfig = Field(default_factory=ExtractionConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @classmethod
    def from_mapping(cls, raw: Mapping[str, object]) -> GeneratorConfig:
        """사전 형태 설정을 검증해 설정 객체로 변환한다."""
        try:
            return cls.model_validate(dict(raw))
        except ValidationError as exc:
            raise ConfigurationError(f"설정값이 유효하지 않습니다: {exc}") from exc
