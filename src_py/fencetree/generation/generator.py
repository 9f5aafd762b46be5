"""
목적:
- 문서 파싱부터 소스 트리 생성까지 묶는 공개 클래스 `MarkdownProjectGenerator`를 제공한다.

설명:
- 문서 -> BlockExtractor -> PathResolver -> ContentNormalizer -> ProjectWriter 순서로 흐른다.
- 원본 문서를 읽지 못하면 어떤 파일도 쓰기 전에 `SourceDocumentError`를 발생시킨다.
- 대화형 검토/콘솔 출력은 이 클래스의 책임이 아니다.

디자인 패턴:
- 서비스 레이어(Service Layer) + 퍼사드(Facade).

참조:
- src_py/fencetree/extraction/block_extractor.py
- src_py/fencetree/normalization/content_normalizer.py
- src_py/fencetree/generation/writer.py
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from fencetree.config.models import GeneratorConfig
from fencetree.contracts.block_models import FencedBlock
from fencetree.contracts.generation_models import GenerationResult, ParseStats
from fencetree.exceptions import SourceDocumentError
from fencetree.extraction.block_extractor import BlockExtractor
from fencetree.extraction.path_resolver import PathResolver
from fencetree.extraction.statistics import summarize_blocks
from fencetree.generation.writer import ProjectWriter
from fencetree.normalization.content_normalizer import normalize_blocks

_logger = logging.getLogger(__name__)


class MarkdownProjectGenerator:
    """Markdown 문서로 프로젝트 소스 트리를 만드는 엔진 클래스."""

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        resolver: PathResolver | None = None,
    ) -> None:
        self._config = config or GeneratorConfig()
        self._extractor = BlockExtractor(config=self._config.extraction, resolver=resolver)

    @property
    def config(self) -> GeneratorConfig:
        return self._config

    def load_document(self, source_path: str | Path) -> str:
        """원본 문서 전체를 읽는다."""
        source = Path(source_path)
        if not source.is_file():
            raise SourceDocumentError(f"원본 문서가 존재하지 않습니다: {source}")
        try:
            return source.read_text(encoding=self._config.output.encoding)
        except (OSError, UnicodeDecodeError) as exc:
            raise SourceDocumentError(f"원본 문서를 읽을 수 없습니다: {source}: {exc}") from exc

    def parse(self, document_text: str) -> list[FencedBlock]:
        """문서 텍스트에서 경로가 결정되고 정규화된 블록 목록을 반환한다."""
        blocks = self._extractor.extract(document_text)
        return normalize_blocks(blocks)

    def parse_file(self, source_path: str | Path) -> list[FencedBlock]:
        return self.parse(self.load_document(source_path))

    def summarize(self, blocks: Iterable[FencedBlock]) -> ParseStats:
        return summarize_blocks(blocks)

    def writer_for(self, output_root: str | Path) -> ProjectWriter:
        """출력 루트용 ProjectWriter를 생성한다."""
        return ProjectWriter(output_root, config=self._config.output)

    def generate_all(
        self,
        blocks: Iterable[FencedBlock],
        output_root: str | Path,
        *,
        create_base_tree: bool = False,
    ) -> GenerationResult:
        """블록 목록을 출력 루트 아래 파일로 생성한다."""
        writer = self.writer_for(output_root)
        base_directories = writer.create_base_tree() if create_base_tree else 0
        result = writer.generate_all(blocks)
        if base_directories:
            result = result.model_copy(
                update={"directories_created": result.directories_created + base_directories}
            )
        return result

    def generate_docs(self, source_path: str | Path, output_root: str | Path) -> Path:
        """원본 문서를 출처 배너와 함께 문서 파일로 생성한다."""
        return self.writer_for(output_root).generate_docs(source_path)

    def run(
        self,
        source_path: str | Path,
        output_root: str | Path,
        *,
        with_docs: bool = True,
        create_base_tree: bool = True,
    ) -> GenerationResult:
        """문서를 읽어 전체 트리와 문서 파일을 한 번에 생성한다."""
        document_text = self.load_document(source_path)
        blocks = self.parse(document_text)
        _logger.info("블록 %d개 발견: %s", len(blocks), self.summarize(blocks))

        writer = self.writer_for(output_root)
        if create_base_tree:
            writer.create_base_tree()
        result = writer.generate_all(blocks)
        if with_docs:
            writer.generate_docs(source_path)

        return result.model_copy(
            update={
                "files_created": writer.files_created,
                "directories_created": writer.directories_created,
            }
        )
