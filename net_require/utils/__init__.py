"""
유틸리티 패키지

공통으로 사용되는 유틸리티 함수들을 포함합니다.
"""

from .logging import setup_logging
from .helpers import ensure_directory, strip_trailing_slashes

__all__ = [
    "setup_logging",
    "ensure_directory",
    "strip_trailing_slashes",
]
