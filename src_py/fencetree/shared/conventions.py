"""
목적:
- 생성 대상 소스 트리의 고정 규약(루트 경로, 테스트 표식, 확장자 목록)을 제공한다.

설명:
- 경로 추론, 블록 분류, 본문 정규화, 파일 생성 단계가 같은 상수를 공유한다.
- 다른 fencetree 모듈을 import하지 않는 말단 모듈이다.

디자인 패턴:
- 상수 모듈(Constant Module).

참조:
- src_py/fencetree/extraction/path_patterns.py
- src_py/fencetree/contracts/block_types.py
- src_py/fencetree/normalization/content_normalizer.py
"""

from __future__ import annotations

FENCE_MARKER = "```"
PHASE_HEADING_PREFIX = "## "
SECTION_HEADING_PREFIX = "### "

PRIMARY_LANGUAGE_TAG = "java"
PRIMARY_EXTENSION = ".java"
SOURCE_ROOT_MARKER = "/java/"

MAIN_SOURCE_ROOT = "src/main/java"
TEST_SOURCE_ROOT = "src/test/java"
MAIN_RESOURCE_ROOT = "src/main/resources"
TEST_RESOURCE_ROOT = "src/test/resources"
SCRIPTS_ROOT = "scripts"

DEFAULT_BASE_DIRECTORIES = (
    MAIN_SOURCE_ROOT,
    MAIN_RESOURCE_ROOT,
    TEST_SOURCE_ROOT,
    TEST_RESOURCE_ROOT,
)

TEST_NAME_SUFFIXES = ("Test", "Tests", "Spec", "IT")
TEST_MARKER_TOKENS = (
    "@Test",
    "@SpringBootTest",
    "@DataJpaTest",
    "@WebMvcTest",
    "@ExtendWith",
    "@Testcontainers",
)

VALID_EXTENSIONS = (
    ".java",
    ".xml",
    ".yml",
    ".yaml",
    ".properties",
    ".json",
    ".sql",
    ".sh",
    ".md",
    ".gradle",
    ".kts",
    ".html",
    ".css",
    ".js",
    ".ts",
)
BARE_INFRA_FILENAMES = ("Dockerfile", "Makefile", ".gitignore")

CONFIG_EXTENSIONS = (".xml", ".yml", ".yaml", ".properties", ".json")
SCRIPT_EXTENSIONS = (".sh", ".bat")

XML_PROLOG = '<?xml version="1.0" encoding="UTF-8"?>'
FRAMEWORK_XML_ROOTS = ("<beans", "<configuration")


def contains_test_marker(body: str) -> bool:
    """본문에 테스트 프레임워크 표식 토큰이 있는지 확인한다."""
    return any(token in body for token in TEST_MARKER_TOKENS)


def split_lines(text: str) -> list[str]:
    """텍스트를 `\\n`(및 `\\r\\n`) 기준으로만 나눈다. 마지막 줄바꿈 뒤 빈 줄은 만들지 않는다."""
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]
