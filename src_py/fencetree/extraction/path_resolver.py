"""
목적:
- 코드 블록 하나의 목적지 상대 경로를 추론한다.

설명:
- 다섯 가지 추론 전략을 순서대로 시도하고 처음 성공한 결과를 사용한다.
  1) 본문 앞부분 주석의 경로 힌트
  2) 섹션 제목의 경로 힌트
  3) 펜스 직전 문맥 창의 경로 힌트
  4) Java 패키지/타입 선언 기반 구조 추론
  5) 선언형 언어(XML/YAML/SQL 등)의 내용 형태 추론
- 모든 전략은 같은 입력 계약(`ResolutionContext`)을 받는 순수 함수다.
  전략 목록만 바꾸면 호출부 수정 없이 추가/삭제/재정렬할 수 있다.
- 추론 실패는 오류가 아니다. None을 반환하면 블록은 제외된다.

디자인 패턴:
- 책임 연쇄(Chain of Responsibility) + 전략(Strategy).

참조:
- src_py/fencetree/extraction/path_patterns.py
- src_py/fencetree/extraction/block_extractor.py
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from fencetree.extraction.path_patterns import (
    extract_java_declarations,
    extract_path_from_text,
    extract_script_name,
    first_non_blank_line,
    is_valid_candidate,
    normalize_candidate,
)
from fencetree.shared.conventions import (
    MAIN_RESOURCE_ROOT,
    MAIN_SOURCE_ROOT,
    PRIMARY_EXTENSION,
    PRIMARY_LANGUAGE_TAG,
    SCRIPTS_ROOT,
    TEST_NAME_SUFFIXES,
    TEST_RESOURCE_ROOT,
    TEST_SOURCE_ROOT,
    contains_test_marker,
    split_lines,
)

_logger = logging.getLogger(__name__)

DEFAULT_HINT_SCAN_LINES = 5

_SPRING_YAML_KEYS = ("spring:", "server:", "datasource:", "jpa:")
_BUILD_SCRIPT_MARKERS = ("plugins {", "dependencies {")
_SHELL_TAGS = {"bash", "sh", "shell", "zsh"}


@dataclass(frozen=True, slots=True)
class ResolutionContext:
    """경로 추론 전략의 공통 입력."""

    body: str
    language_tag: str
    section: str = ""
    context_window: str = ""
    hint_scan_lines: int = DEFAULT_HINT_SCAN_LINES

    @property
    def language(self) -> str:
        return self.language_tag.strip().lower()

    def mentions_test(self) -> bool:
        return "test" in self.section.lower() or "test" in self.context_window.lower()


Strategy = Callable[[ResolutionContext], str | None]


def hint_from_body(ctx: ResolutionContext) -> str | None:
    """본문 앞부분의 주석 줄에서 경로 힌트를 찾는다."""
    for raw_line in split_lines(ctx.body)[: ctx.hint_scan_lines]:
        line = raw_line.strip()
        comment: str | None = None
        if line.startswith("//"):
            comment = line[2:].strip()
        elif line.startswith("#") and not line.startswith("#!"):
            comment = line[1:].strip()
        elif "<!--" in line:
            comment = line
        if comment is None:
            continue

        path = extract_path_from_text(comment)
        if path is not None:
            return path
    return None


def hint_from_section(ctx: ResolutionContext) -> str | None:
    """섹션 제목 텍스트에서 경로 힌트를 찾는다."""
    return extract_path_from_text(ctx.section)


def hint_from_context_window(ctx: ResolutionContext) -> str | None:
    """펜스 직전 문맥 창 텍스트에서 경로 힌트를 찾는다."""
    return extract_path_from_text(ctx.context_window)


def infer_java_path(ctx: ResolutionContext) -> str | None:
    """Java 패키지/타입 선언으로 소스 경로를 합성한다."""
    if ctx.language != PRIMARY_LANGUAGE_TAG:
        return None

    package_name, type_name = extract_java_declarations(ctx.body)
    if package_name is None or type_name is None:
        return None

    root = TEST_SOURCE_ROOT if _is_test_type(type_name, ctx.body) else MAIN_SOURCE_ROOT
    package_path = package_name.replace(".", "/")
    return f"{root}/{package_path}/{type_name}{PRIMARY_EXTENSION}"


def infer_from_content_shape(ctx: ResolutionContext) -> str | None:
    """선언형 언어 본문의 형태로 고정 경로를 고른다."""
    lang = ctx.language
    body = ctx.body
    lead = first_non_blank_line(body)

    if lang == "xml":
        if "<project" in body:
            return "pom.xml"
        if "<beans" in body or "<configuration" in body:
            return f"{MAIN_RESOURCE_ROOT}/application-context.xml"

    if lang in {"yaml", "yml"}:
        if any(key in body for key in _SPRING_YAML_KEYS):
            if ctx.mentions_test():
                return f"{TEST_RESOURCE_ROOT}/application-test.yml"
            return f"{MAIN_RESOURCE_ROOT}/application.yml"
        if "services:" in body and "image:" in body:
            return "docker-compose.yml"

    if lang == "properties":
        if ctx.mentions_test():
            return f"{TEST_RESOURCE_ROOT}/application-test.properties"
        return f"{MAIN_RESOURCE_ROOT}/application.properties"

    if lang == "sql":
        upper = body.upper()
        if "CREATE TABLE" in upper:
            return f"{MAIN_RESOURCE_ROOT}/schema.sql"
        if "INSERT INTO" in upper:
            return f"{MAIN_RESOURCE_ROOT}/data.sql"
        return f"{MAIN_RESOURCE_ROOT}/script.sql"

    if lang == "dockerfile" or lead.startswith("FROM "):
        return "Dockerfile"

    if lang in _SHELL_TAGS or lead.startswith("#!"):
        script_name = extract_script_name(ctx.section)
        return f"{SCRIPTS_ROOT}/{script_name or 'script.sh'}"

    if lang in {"gradle", "groovy"} and any(marker in body for marker in _BUILD_SCRIPT_MARKERS):
        return "build.gradle"

    if lang in {"kotlin", "kts"} and any(marker in body for marker in _BUILD_SCRIPT_MARKERS):
        return "build.gradle.kts"

    return None


DEFAULT_STRATEGIES: tuple[tuple[str, Strategy], ...] = (
    ("body-hint", hint_from_body),
    ("section-hint", hint_from_section),
    ("context-hint", hint_from_context_window),
    ("java-structure", infer_java_path),
    ("content-shape", infer_from_content_shape),
)


class PathResolver:
    """전략 목록을 순서대로 적용하는 경로 추론기."""

    def __init__(self, strategies: Sequence[tuple[str, Strategy]] | None = None) -> None:
        self._strategies = tuple(DEFAULT_STRATEGIES if strategies is None else strategies)

    @property
    def strategy_names(self) -> tuple[str, ...]:
        return tuple(name for name, _ in self._strategies)

    def resolve(self, ctx: ResolutionContext) -> str | None:
        """첫 번째로 성공한 전략의 정규화된 경로를 반환한다."""
        for name, strategy in self._strategies:
            candidate = strategy(ctx)
            if candidate is None:
                _logger.debug("  %s: 후보 없음", name)
                continue

            path = normalize_candidate(candidate)
            if not path or not is_valid_candidate(path):
                _logger.debug("  %s: 후보 거부 %r", name, candidate)
                continue

            _logger.debug("  %s: 경로 결정 %s", name, path)
            return path
        return None


_DEFAULT_RESOLVER = PathResolver()


def resolve_path(
    body: str,
    language_tag: str,
    section: str = "",
    context_window: str = "",
    *,
    hint_scan_lines: int = DEFAULT_HINT_SCAN_LINES,
) -> str | None:
    """기본 전략 순서로 블록의 목적지 경로를 추론한다."""
    ctx = ResolutionContext(
        body=body,
        language_tag=language_tag,
        section=section,
        context_window=context_window,
        hint_scan_lines=hint_scan_lines,
    )
    return _DEFAULT_RESOLVER.resolve(ctx)


def _is_test_type(type_name: str, body: str) -> bool:
    return type_name.endswith(TEST_NAME_SUFFIXES) or contains_test_marker(body)
