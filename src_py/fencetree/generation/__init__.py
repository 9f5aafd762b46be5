"""
목적:
- 파일 생성 계층의 공개 심볼을 정의한다.

디자인 패턴:
- 퍼사드(Facade).

참조:
- src_py/fencetree/generation/generator.py
- src_py/fencetree/generation/writer.py
"""

from .generator import MarkdownProjectGenerator
from .writer import ProjectWriter, build_provenance_banner

__all__ = ["MarkdownProjectGenerator", "ProjectWriter", "build_provenance_banner"]
