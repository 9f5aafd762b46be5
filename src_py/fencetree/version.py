"""
목적:
- 패키지 버전 문자열을 단일 위치에서 관리한다.

참조:
- pyproject.toml
"""

__version__ = "0.1.0"
