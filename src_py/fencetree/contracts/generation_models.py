"""
목적:
- 파싱 통계와 파일 생성 결과 인터페이스 모델을 정의한다.

설명:
- 통계는 최종 블록 목록을 훑어서 계산하는 읽기 전용 요약이다.
- 생성 결과는 성공/제외/실패 건수를 함께 보고한다.

디자인 패턴:
- DTO(Data Transfer Object).

참조:
- src_py/fencetree/extraction/statistics.py
- src_py/fencetree/generation/writer.py
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ParseStats(BaseModel):
    """파싱 결과 요약 모델."""

    model_config = ConfigDict(frozen=True)

    total_blocks: int = Field(ge=0)
    java_files: int = Field(ge=0)
    test_files: int = Field(ge=0)
    config_files: int = Field(ge=0)
    other_files: int = Field(ge=0)
    total_lines: int = Field(ge=0)

    def __str__(self) -> str:
        return (
            f"Total: {self.total_blocks} | Java: {self.java_files} (Tests: {self.test_files}) | "
            f"Config: {self.config_files} | Other: {self.other_files} | Lines: {self.total_lines}"
        )


class PhaseSummary(BaseModel):
    """단계(phase)별 블록 건수 모델."""

    model_config = ConfigDict(frozen=True)

    phase: str
    production: int = Field(default=0, ge=0)
    tests: int = Field(default=0, ge=0)
    config: int = Field(default=0, ge=0)


class BlockFailure(BaseModel):
    """단일 블록 생성 실패 모델."""

    sequence: int = Field(ge=1)
    path: str = Field(min_length=1)
    error: str = Field(default="")


class GenerationResult(BaseModel):
    """파일 생성 실행 결과 모델."""

    files_created: int = Field(default=0, ge=0)
    directories_created: int = Field(default=0, ge=0)
    dropped_blocks: int = Field(default=0, ge=0)
    failures: list[BlockFailure] = Field(default_factory=list)

    @property
    def failed_blocks(self) -> int:
        return len(self.failures)

    def __str__(self) -> str:
        return (
            f"Files created: {self.files_created} | Directories created: {self.directories_created} | "
            f"Dropped: {self.dropped_blocks} | Failed: {self.failed_blocks}"
        )
