"""
저장소 레지스트리 모듈

저장소 이름과 기본 URL 의 매핑을 관리합니다.
"""

import re
from pathlib import Path
from typing import Any

from ..config.settings import Settings
from ..exceptions import (
    RepositoryExistsException,
    RepositoryNotFoundException,
    RepositoryValidationException,
)
from ..models.base import REPOSITORY_NAME_PATTERN, Repository
from ..utils.helpers import strip_trailing_slashes
from ..utils.logging import get_logger
from .fetcher import HttpFetcher
from .store import JsonFileStore

logger = get_logger(__name__)

_NAME_RE = re.compile(REPOSITORY_NAME_PATTERN)


class RepositoryRegistry:
    """저장소 레지스트리"""

    def __init__(self, settings: Settings, fetcher: HttpFetcher):
        """
        저장소 레지스트리 초기화

        Args:
            settings: 시스템 설정
            fetcher: URL 사전 확인에 사용할 HTTP 페처
        """
        self.settings = settings
        self.fetcher = fetcher
        self.logger = logger
        self.store = JsonFileStore(settings.get_repository_file_path(), self._is_valid_entry)

    @staticmethod
    def validate_name(name: Any) -> bool:
        """저장소 이름 유효성 (소문자로 시작, 소문자/숫자로 구성, 2자 이상)"""
        return isinstance(name, str) and _NAME_RE.fullmatch(name) is not None

    @staticmethod
    def validate_url(url: Any) -> bool:
        """저장소 URL 유효성 (비어있지 않은 문자열)"""
        return isinstance(url, str) and len(url) > 0

    @classmethod
    def _is_valid_entry(cls, name: Any, url: Any) -> bool:
        return cls.validate_name(name) and cls.validate_url(url)

    def _require_valid_name(self, name: Any) -> None:
        if not self.validate_name(name):
            raise RepositoryValidationException("name", name)

    def _load_existing(self, name: str) -> dict[str, str]:
        self._require_valid_name(name)
        repositories = self.store.load()
        if name not in repositories:
            raise RepositoryNotFoundException(name)
        return repositories

    async def add(self, name: str, url: str) -> Repository:
        """
        저장소 등록

        Args:
            name: 저장소 이름
            url: 저장소 기본 URL

        Returns:
            Repository: 등록된 저장소 (끝의 '/' 가 제거된 URL)

        Raises:
            RepositoryValidationException: 이름 또는 URL 형식 오류
            RepositoryExistsException: 이미 등록된 이름
            NetworkException: URL 에 연결할 수 없을 때
        """
        self._require_valid_name(name)
        if not self.validate_url(url) or not strip_trailing_slashes(url):
            raise RepositoryValidationException("url", url)

        repositories = self.store.load()
        if name in repositories:
            raise RepositoryExistsException(name)

        await self.fetcher.check_url(url)

        repositories[name] = strip_trailing_slashes(url)
        self.store.save(repositories)

        self.logger.info(f"저장소 등록: {name} -> {repositories[name]}")
        return Repository(name=name, url=repositories[name])

    def has(self, name: str) -> bool:
        """저장소 등록 여부"""
        self._require_valid_name(name)
        return name in self.store.load()

    def get_url(self, name: str) -> str:
        """
        저장소 기본 URL 조회

        Raises:
            RepositoryNotFoundException: 등록되지 않은 저장소
        """
        return self._load_existing(name)[name]

    def get_dir_path(self, name: str) -> Path:
        """
        저장소별 다운로드 디렉토리 (<download_dir>/<name>)

        Raises:
            RepositoryNotFoundException: 등록되지 않은 저장소
        """
        self._load_existing(name)
        return self.settings.get_download_dir() / name

    def remove(self, name: str) -> None:
        """
        저장소 등록 해제

        다운로드된 파일과 해시 캐시 항목은 삭제하지 않습니다.

        Raises:
            RepositoryNotFoundException: 등록되지 않은 저장소
        """
        repositories = self._load_existing(name)
        del repositories[name]
        self.store.save(repositories)
        self.logger.info(f"저장소 등록 해제: {name}")

    def list_repositories(self) -> list[Repository]:
        """등록된 저장소 목록 (이름 순)"""
        repositories = self.store.load()
        return [Repository(name=name, url=url) for name, url in sorted(repositories.items())]
