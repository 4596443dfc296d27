"""
네트워크 모듈 로더 패키지

원격 저장소의 모듈을 내려받아 로컬에 캐싱하고 로드하는 기능을 제공합니다.
"""

from .fetcher import HttpFetcher
from .hash_cache import HashCache, generate_hash
from .module_loader import NetRequire, get_default_resolver, require
from .registry import RepositoryRegistry
from .resolver import ModuleResolver
from .store import JsonFileStore

__all__ = [
    "HttpFetcher",
    "HashCache",
    "JsonFileStore",
    "ModuleResolver",
    "NetRequire",
    "RepositoryRegistry",
    "generate_hash",
    "get_default_resolver",
    "require",
]
