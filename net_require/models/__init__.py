"""
데이터 모델 패키지

net-require 에서 사용되는 데이터 모델들을 정의합니다.
"""

from .base import HashEntry, ImportReference, Repository, RequireOptions, RequireResult
from .enums import UpdateReason

__all__ = [
    "HashEntry",
    "ImportReference",
    "Repository",
    "RequireOptions",
    "RequireResult",
    "UpdateReason",
]
