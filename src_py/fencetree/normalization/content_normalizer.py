"""
목적:
- 경로가 결정된 블록 본문에서 경로 반복 흔적을 지우고 필수 상용구를 주입한다.

설명:
- 첫 줄이 목적지 경로(전체 경로 또는 파일명)를 담고 있으면 그 줄을 지운다.
  바로 다음 줄이 빈 줄이나 주석 기호만 남은 줄이면 한 줄 더 지운다.
- Java 파일은 본문이 패키지 선언으로 시작하지 않으면 경로에서 패키지명을 구해 앞에 붙인다.
- 프레임워크 XML 설정 파일은 XML 선언으로 시작하지 않으면 선언을 앞에 붙인다.
- 결과는 항상 새 본문/새 레코드이며, 같은 입력에 반복 적용해도 결과가 변하지 않는다.

디자인 패턴:
- 순수 함수 파이프라인(Pure Function Pipeline).

참조:
- src_py/fencetree/contracts/block_models.py
- src_py/fencetree/generation/writer.py
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from fencetree.contracts.block_models import FencedBlock
from fencetree.shared.conventions import (
    FRAMEWORK_XML_ROOTS,
    PRIMARY_EXTENSION,
    SOURCE_ROOT_MARKER,
    XML_PROLOG,
    split_lines,
)

_logger = logging.getLogger(__name__)

_COMMENT_REMNANTS = {"", "//", "#", "--", "/*", "*/", "<!--", "-->"}


def normalize_body(body: str, path: str) -> str:
    """본문을 정규화한 새 문자열을 반환한다."""
    content = strip_path_echo(body, path)

    if path.endswith(PRIMARY_EXTENSION):
        content = ensure_package_declaration(content, path)
    if path.endswith(".xml"):
        content = ensure_xml_prolog(content)

    content = content.strip("\n")
    return f"{content}\n" if content else ""


def normalize_block(block: FencedBlock) -> FencedBlock:
    """본문만 정규화한 새 블록을 반환한다. 경로가 없으면 그대로 돌려준다."""
    if block.path is None:
        return block
    body = normalize_body(block.body, block.path)
    if body == block.body:
        return block
    _logger.debug("본문 정규화: #%d %s", block.sequence, block.path)
    return block.model_copy(update={"body": body})


def normalize_blocks(blocks: Iterable[FencedBlock]) -> list[FencedBlock]:
    return [normalize_block(block) for block in blocks]


def strip_path_echo(body: str, path: str) -> str:
    """첫 줄의 경로 반복과 그 뒤에 남은 주석 기호 한 줄을 제거한다."""
    lines = split_lines(body)
    _drop_leading_blank_lines(lines)
    while lines and echoes_path(lines[0], path):
        del lines[0]
        if lines and lines[0].strip() in _COMMENT_REMNANTS:
            del lines[0]
        _drop_leading_blank_lines(lines)
    return "\n".join(lines)


def echoes_path(line: str, path: str) -> bool:
    """줄이 전체 경로 또는 파일명을 포함하는지 확인한다."""
    if not path:
        return False
    file_name = path.rsplit("/", 1)[-1]
    return path in line or file_name in line


def ensure_package_declaration(content: str, path: str) -> str:
    """패키지 선언이 없으면 경로에서 구한 선언과 빈 줄 하나를 앞에 붙인다."""
    if content.lstrip().startswith("package "):
        return content

    package_name = package_from_path(path)
    if not package_name:
        return content
    return f"package {package_name};\n\n{content}"


def package_from_path(path: str) -> str | None:
    """소스 루트 표식과 파일명 사이의 경로를 패키지명으로 변환한다."""
    prefixed = f"/{path}"
    marker_index = prefixed.find(SOURCE_ROOT_MARKER)
    if marker_index == -1:
        return None

    package_part = prefixed[marker_index + len(SOURCE_ROOT_MARKER):]
    if "/" not in package_part:
        return None
    return package_part.rsplit("/", 1)[0].replace("/", ".")


def ensure_xml_prolog(content: str) -> str:
    """프레임워크 설정 XML이면서 XML 선언이 없으면 선언을 앞에 붙인다."""
    lead = content.lstrip()
    if lead.startswith("<?xml") or lead.startswith("<project"):
        return content
    if not any(root in content for root in FRAMEWORK_XML_ROOTS):
        return content
    return f"{XML_PROLOG}\n{content}"


def _drop_leading_blank_lines(lines: list[str]) -> None:
    while lines and not lines[0].strip():
        del lines[0]
