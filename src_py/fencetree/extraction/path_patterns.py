"""
목적:
- PathResolver에서 공통으로 쓰는 경로 패턴/검증/정규화 유틸을 제공한다.

설명:
- 텍스트에서 파일 경로 후보를 찾는 네 가지 패턴을 순서대로 적용한다.
- 후보 검증(확장자 허용 목록/인프라 파일명)과 후보 정규화(구두점 제거,
  기본 설정 파일명의 표준 위치 재배치)를 담당한다.
- Java 본문에서 패키지 선언과 첫 타입 선언을 추출한다.

디자인 패턴:
- 함수형 유틸 모듈(Function Utility Module).

참조:
- src_py/fencetree/extraction/path_resolver.py
"""

from __future__ import annotations

import re

from fencetree.shared.conventions import (
    BARE_INFRA_FILENAMES,
    MAIN_RESOURCE_ROOT,
    SCRIPTS_ROOT,
    TEST_RESOURCE_ROOT,
    VALID_EXTENSIONS,
    split_lines,
)

# 순서가 곧 우선순위다.
PATH_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"(src/(?:main|test)/(?:java|resources)/[^\s`\"'<>]+\.[a-zA-Z]+)"),
    re.compile(
        r"(?<![\w.-])(pom\.xml|build\.gradle(?:\.kts)?|settings\.gradle(?:\.kts)?"
        r"|Dockerfile|docker-compose\.ya?ml|\.gitignore)(?![\w-])"
    ),
    re.compile(r"(?<![\w-])(application(?:-[a-zA-Z]+)?\.(?:yml|yaml|properties))\b"),
    re.compile(r"\b([a-zA-Z][a-zA-Z0-9_-]*\.(?:java|xml|yml|yaml|properties|json|sql|sh|md))\b"),
)

SCRIPT_NAME_PATTERN = re.compile(r"([a-zA-Z][a-zA-Z0-9_-]*\.sh)\b")
PACKAGE_PATTERN = re.compile(r"^\s*package\s+([a-zA-Z_][a-zA-Z0-9_.]*)\s*;", re.MULTILINE)
TYPE_NAME_PATTERN = re.compile(r"\b(?:class|interface|enum|record)\s+([A-Z][a-zA-Z0-9_]*)")

_APPLICATION_CONFIG_PATTERN = re.compile(
    r"^application(?:-(?P<profile>[a-zA-Z]+))?\.(?P<ext>yml|yaml|properties)$"
)
_SURROUNDING_PUNCTUATION = "`'\"<>()[] \t"


def extract_path_from_text(text: str) -> str | None:
    """텍스트에서 검증을 통과한 첫 경로 후보를 반환한다."""
    if not text:
        return None
    for pattern in PATH_PATTERNS:
        matched = pattern.search(text)
        if matched is None:
            continue
        candidate = matched.group(1)
        if is_parent_traversal(candidate):
            return None
        if is_valid_candidate(candidate):
            return candidate
    return None


def is_valid_candidate(candidate: str) -> bool:
    """경로 후보가 확장자 허용 목록 또는 인프라 파일명 규칙을 만족하는지 확인한다."""
    if not candidate or is_parent_traversal(candidate):
        return False
    file_name = candidate.rsplit("/", 1)[-1]
    if file_name in BARE_INFRA_FILENAMES:
        return True
    if candidate.startswith(".") or "." not in file_name:
        return False
    return candidate.endswith(VALID_EXTENSIONS)


def is_parent_traversal(candidate: str) -> bool:
    """경로에 상위 디렉터리(`..`) 세그먼트가 있는지 확인한다."""
    return ".." in candidate.replace("\\", "/").split("/")


def normalize_candidate(candidate: str) -> str:
    """구두점을 제거하고 기본 설정/스크립트 파일명을 표준 위치로 옮긴다."""
    path = candidate.strip().strip(_SURROUNDING_PUNCTUATION)
    for char in "`'\"<>":
        path = path.replace(char, "")
    path = path.lstrip("/")

    if "/" in path:
        return path

    config_match = _APPLICATION_CONFIG_PATTERN.match(path)
    if config_match is not None:
        profile = config_match.group("profile")
        ext = config_match.group("ext")
        if profile is None:
            ext = "yml" if ext == "yaml" else ext
            return f"{MAIN_RESOURCE_ROOT}/application.{ext}"
        if profile.lower() == "test":
            ext = "yml" if ext == "yaml" else ext
            return f"{TEST_RESOURCE_ROOT}/application-{profile}.{ext}"
        return f"{MAIN_RESOURCE_ROOT}/{path}"

    if path.endswith(".sh"):
        return f"{SCRIPTS_ROOT}/{path}"
    return path


def extract_script_name(text: str) -> str | None:
    """텍스트에서 셸 스크립트 파일명 토큰을 찾는다."""
    if not text:
        return None
    matched = SCRIPT_NAME_PATTERN.search(text)
    if matched is None:
        return None
    return matched.group(1)


def extract_java_declarations(body: str) -> tuple[str | None, str | None]:
    """본문에서 (패키지명, 첫 타입명)을 추출한다."""
    package_match = PACKAGE_PATTERN.search(body)
    type_match = TYPE_NAME_PATTERN.search(body)
    package_name = package_match.group(1) if package_match else None
    type_name = type_match.group(1) if type_match else None
    return package_name, type_name


def first_non_blank_line(text: str) -> str:
    """첫 번째 비어 있지 않은 줄을 trim해서 반환한다."""
    for line in split_lines(text):
        stripped = line.strip()
        if stripped:
            return stripped
    return ""


__all__ = [
    "PATH_PATTERNS",
    "extract_java_declarations",
    "extract_path_from_text",
    "extract_script_name",
    "first_non_blank_line",
    "is_parent_traversal",
    "is_valid_candidate",
    "normalize_candidate",
]
