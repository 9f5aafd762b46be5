"""
목적:
- Markdown 문서로 프로젝트 소스 트리를 생성하는 드라이버 스크립트를 제공한다.

설명:
- 라이브러리 본체는 인자 파싱/콘솔 출력을 하지 않는다.
- 이 스크립트는 설정 객체를 만들어 `MarkdownProjectGenerator.run`을 비대화형으로 실행하고
  결과 모델을 JSON으로 출력한다.

디자인 패턴:
- 드라이버(Driver Script).

참조:
- src_py/fencetree/config/models.py
- src_py/fencetree/generation/generator.py
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from fencetree import ExtractionConfig, GeneratorConfig, MarkdownProjectGenerator, OutputConfig


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Markdown 문서 기반 프로젝트 생성 드라이버")
    parser.add_argument("document", type=Path, help="코드 블록이 담긴 Markdown 문서 경로")
    parser.add_argument(
        "output",
        type=Path,
        nargs="?",
        default=Path("generated-project"),
        help="생성 대상 루트 디렉터리 (기본: ./generated-project)",
    )
    parser.add_argument("--no-docs", action="store_true", help="원본 문서 재생산 파일을 만들지 않음")
    parser.add_argument(
        "--no-base-tree",
        action="store_true",
        help="표준 src/main, src/test 디렉터리를 미리 만들지 않음",
    )
    parser.add_argument("--dry-run", action="store_true", help="파일을 쓰지 않고 추출 결과만 출력")
    parser.add_argument("--docs-filename", default="README.md", help="문서 재생산 파일명")
    parser.add_argument(
        "--phase-keyword",
        action="append",
        default=None,
        help="단계 제목 키워드 (반복 지정 가능, 기본: PHASE/PART/STEP/FASE)",
    )
    parser.add_argument("--debug", action="store_true", help="경로 추론 과정 DEBUG 로그 출력")
    return parser.parse_args()


def build_config(args: argparse.Namespace) -> GeneratorConfig:
    extraction = (
        ExtractionConfig(phase_keywords=tuple(args.phase_keyword))
        if args.phase_keyword
        else ExtractionConfig()
    )
    return GeneratorConfig(
        extraction=extraction,
        output=OutputConfig(docs_filename=args.docs_filename),
    )


def main() -> int:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    generator = MarkdownProjectGenerator(config=build_config(args))

    if args.dry_run:
        blocks = generator.parse_file(args.document)
        for block in blocks:
            print(f"[block] {block}  ->  {block.path}")
        print("[parse-stats]", generator.summarize(blocks).model_dump_json())
        return 0

    result = generator.run(
        args.document,
        args.output.resolve(),
        with_docs=not args.no_docs,
        create_base_tree=not args.no_base_tree,
    )
    print("[generation-result]", result.model_dump_json())
    return 1 if result.failures else 0


if __name__ == "__main__":
    try:
        raise SystemExit(main())
    except Exception as exc:  # noqa: BLE001
        print(f"[error] {exc}", file=sys.stderr)
        raise SystemExit(1)
