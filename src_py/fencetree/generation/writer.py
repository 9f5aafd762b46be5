"""
목적:
- 경로가 결정되고 정규화된 블록을 출력 루트 아래 파일로 기록한다.

설명:
- 블록마다 없는 상위 디렉터리를 재귀 생성하고 파일을 항상 덮어쓴다.
- 출력 루트 밖으로 벗어나는 경로는 블록 단위 쓰기 실패로 처리한다.
- 새로 만든 디렉터리는 단계마다 정확히 한 번만 센다.
- 일괄 생성은 블록 단위 실패를 기록하고 나머지 블록을 계속 처리한다.
- 원본 문서를 출처 배너와 함께 고정 이름의 문서 파일로 재생산한다.
  원본의 줄바꿈(CRLF 포함)은 변환하지 않는다.
  원본을 읽지 못하면 아무것도 쓰지 않고, 쓰기는 임시 파일 교체로 원자적으로 수행한다.

디자인 패턴:
- 서비스 레이어(Service Layer).

참조:
- src_py/fencetree/contracts/generation_models.py
- src_py/fencetree/config/models.py
"""

from __future__ import annotations

import difflib
import logging
import os
import tempfile
from collections.abc import Iterable
from pathlib import Path

from fencetree.config.models import OutputConfig
from fencetree.contracts.block_models import FencedBlock
from fencetree.contracts.generation_models import BlockFailure, GenerationResult
from fencetree.exceptions import BlockWriteError, SourceDocumentError

_logger = logging.getLogger(__name__)

_BANNER_INNER_WIDTH = 67


def build_provenance_banner(source_name: str) -> str:
    """원본 문서명을 담은 테두리 주석 배너를 만든다."""
    label = "Source: "
    room = _BANNER_INNER_WIDTH - 2 - len(label) - 1
    name = source_name[:room]
    rows = [
        "This file was generated automatically from the source guide.",
        f"{label}{name}",
    ]
    border = "═" * _BANNER_INNER_WIDTH
    lines = ["<!--", f"  ╔{border}╗"]
    lines.extend(f"  ║{('  ' + row).ljust(_BANNER_INNER_WIDTH)}║" for row in rows)
    lines.extend([f"  ╚{border}╝", "-->", "", ""])
    return "\n".join(lines)


class ProjectWriter:
    """출력 루트 아래에 블록 파일을 생성하는 작성기."""

    def __init__(self, output_root: str | Path, config: OutputConfig | None = None) -> None:
        self._root = Path(output_root)
        self._config = config or OutputConfig()
        self._files_created = 0
        self._directories_created = 0

    @property
    def output_root(self) -> Path:
        return self._root

    @property
    def files_created(self) -> int:
        return self._files_created

    @property
    def directories_created(self) -> int:
        return self._directories_created

    def write_block(self, block: FencedBlock) -> Path:
        """블록 하나를 파일로 기록하고 기록한 경로를 반환한다."""
        if block.path is None:
            raise BlockWriteError(
                f"경로가 없는 블록은 기록할 수 없습니다: #{block.sequence}",
                sequence=block.sequence,
                path="",
            )

        target = self._root / block.path
        if not target.resolve().is_relative_to(self._root.resolve()):
            raise BlockWriteError(
                f"출력 루트 밖을 가리키는 경로는 기록할 수 없습니다: {block.path}",
                sequence=block.sequence,
                path=block.path,
            )

        try:
            self._ensure_directory(target.parent)
            target.write_text(block.body, encoding=self._config.encoding)
        except OSError as exc:
            raise BlockWriteError(
                f"파일 생성 실패: {block.path}: {exc}",
                sequence=block.sequence,
                path=block.path,
            ) from exc

        self._files_created += 1
        return target

    def generate_all(self, blocks: Iterable[FencedBlock]) -> GenerationResult:
        """모든 블록을 기록하고 성공/제외/실패 집계를 반환한다."""
        files_before = self._files_created
        directories_before = self._directories_created
        dropped = 0
        failures: list[BlockFailure] = []

        for block in blocks:
            if block.path is None:
                dropped += 1
                continue
            try:
                self.write_block(block)
            except BlockWriteError as exc:
                _logger.warning("블록 생성 실패: #%d %s: %s", exc.sequence, exc.path, exc)
                failures.append(BlockFailure(sequence=exc.sequence, path=exc.path, error=str(exc)))

        result = GenerationResult(
            files_created=self._files_created - files_before,
            directories_created=self._directories_created - directories_before,
            dropped_blocks=dropped,
            failures=failures,
        )
        _logger.info("파일 생성 완료: %s", result)
        return result

    def create_base_tree(self) -> int:
        """표준 소스/리소스 디렉터리를 미리 만들고 새로 만든 디렉터리 수를 반환한다."""
        created = 0
        for directory in self._config.base_directories:
            created += self._ensure_directory(self._root / directory)
        return created

    def file_exists(self, block: FencedBlock) -> bool:
        if block.path is None:
            return False
        return (self._root / block.path).is_file()

    def read_existing(self, block: FencedBlock) -> str | None:
        """블록 경로에 이미 있는 파일 내용을 반환한다. 없으면 None."""
        if not self.file_exists(block):
            return None
        return (self._root / block.path).read_text(encoding=self._config.encoding)

    def diff_against_existing(self, block: FencedBlock) -> list[str]:
        """기존 파일과 블록 본문의 unified diff 줄 목록을 반환한다."""
        existing = self.read_existing(block)
        if existing is None or existing == block.body:
            return []
        return list(
            difflib.unified_diff(
                existing.splitlines(),
                block.body.splitlines(),
                fromfile=f"a/{block.path}",
                tofile=f"b/{block.path}",
                lineterm="",
            )
        )

    def generate_docs(self, source_path: str | Path) -> Path:
        """원본 문서를 출처 배너와 함께 문서 파일로 기록한다."""
        source = Path(source_path)
        try:
            content = source.read_bytes().decode(self._config.encoding)
        except (OSError, UnicodeDecodeError) as exc:
            raise SourceDocumentError(f"원본 문서를 읽을 수 없습니다: {source}: {exc}") from exc

        target = self._root / self._config.docs_filename
        self._ensure_directory(self._root)
        payload = build_provenance_banner(source.name) + content

        fd, temp_name = tempfile.mkstemp(dir=self._root, prefix=".docs-", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding=self._config.encoding, newline="") as handle:
                handle.write(payload)
            os.replace(temp_name, target)
        except BaseException:
            Path(temp_name).unlink(missing_ok=True)
            raise

        self._files_created += 1
        _logger.info("문서 파일 생성: %s (%d bytes)", target, target.stat().st_size)
        return target

    def _ensure_directory(self, directory: Path) -> int:
        missing: list[Path] = []
        current = directory
        while not current.exists():
            missing.append(current)
            if current.parent == current:
                break
            current = current.parent

        for path in reversed(missing):
            path.mkdir(exist_ok=True)
            self._directories_created += 1
        return len(missing)
