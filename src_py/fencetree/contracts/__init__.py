"""
목적:
- Python 계약 모델 계층의 공개 심볼을 제공한다.

설명:
- 블록/유형/통계/생성 결과 모델을 하나의 네임스페이스에서 재노출한다.

디자인 패턴:
- 모듈 퍼사드(Module Facade).

참조:
- src_py/fencetree/contracts/block_models.py
- src_py/fencetree/contracts/block_types.py
- src_py/fencetree/contracts/generation_models.py
"""

from .block_models import FencedBlock
from .block_types import BlockType, classify_block
from .generation_models import BlockFailure, GenerationResult, ParseStats, PhaseSummary

__all__ = [
    "FencedBlock",
    "BlockType",
    "classify_block",
    "ParseStats",
    "PhaseSummary",
    "BlockFailure",
    "GenerationResult",
]
