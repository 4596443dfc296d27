"""
net-require

원격 HTTP 저장소에 있는 파이썬 모듈을 로컬 해시 캐시와 함께 임포트합니다.
"""

from .loader import NetRequire, require
from .models import RequireOptions

__all__ = ["NetRequire", "RequireOptions", "require"]

__version__ = "1.0.0"
