"""
목적:
- fencetree 계층의 예외 타입을 표준화한다.

설명:
- 설정 오류, 원본 문서 읽기 실패, 블록 단위 쓰기 실패를 명시적으로 구분해
  라이브러리 소비자가 처리 전략을 선택할 수 있게 한다.
- 경로 추론 실패는 예외가 아니다. 해당 블록은 조용히 제외된다.

디자인 패턴:
- 계층형 예외(Hierarchical Exception).

참조:
- src_py/fencetree/generation/writer.py
- src_py/fencetree/generation/generator.py
"""


class FencetreeError(Exception):
    """fencetree 공통 베이스 예외."""


class ConfigurationError(FencetreeError):
    """설정값이 유효하지 않을 때 발생한다."""


class SourceDocumentError(FencetreeError):
    """원본 문서가 없거나 읽을 수 없을 때 발생한다."""


class BlockWriteError(FencetreeError):
    """단일 블록의 디렉터리 생성/파일 쓰기가 실패했을 때 발생한다."""

    def __init__(self, message: str, *, sequence: int, path: str) -> None:
        super().__init__(message)
        self.sequence = sequence
        self.path = path


class CursorRangeError(FencetreeError):
    """검토 커서 이동 대상 번호가 범위를 벗어났을 때 발생한다."""
