"""
공통 유틸리티 함수 모듈

net-require 에서 공통으로 사용되는 헬퍼 함수들을 제공합니다.
"""

import posixpath
from pathlib import Path
from typing import Union
from urllib.parse import urlparse

ALLOWED_URL_SCHEMES = frozenset(("http", "https"))


def ensure_directory(path: Union[str, Path]) -> Path:
    """
    디렉토리 존재 확인 및 생성

    Args:
        path: 디렉토리 경로

    Returns:
        Path: 디렉토리 경로 객체
    """
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def strip_trailing_slashes(url: str) -> str:
    """URL 끝의 '/' 를 모두 제거"""
    return url.rstrip('/')


def has_http_scheme(url: str) -> bool:
    """
    URL 이 http/https 스킴과 호스트를 가지는지 확인

    Args:
        url: 검증할 URL

    Returns:
        bool: http(s) URL 여부
    """
    parsed = urlparse(url)
    return parsed.scheme in ALLOWED_URL_SCHEMES and bool(parsed.netloc)


def module_name_from_path(relative_path: str) -> str:
    """
    상대 경로를 점 표기 모듈 이름으로 변환

    Args:
        relative_path: 'pkg/sub/mod' 형태의 상대 경로

    Returns:
        str: 'pkg.sub.mod'
    """
    parts = [part for part in relative_path.replace('\\', '/').split('/') if part]
    return '.'.join(parts)


def normalize_relative_path(relative_path: str) -> str:
    """
    상대 경로 정규화

    '\\' 를 '/' 로 바꾸고 앞쪽 '/' 를 제거한 뒤 '.', '..' 를 정리합니다.

    Args:
        relative_path: 정규화할 상대 경로

    Returns:
        str: 정규화된 경로 (비어있거나 기준 디렉토리 밖을 가리키면 빈 문자열)
    """
    normalized = posixpath.normpath(relative_path.replace('\\', '/').lstrip('/'))
    if normalized in ('.', '..') or normalized.startswith('../'):
        return ''
    return normalized
