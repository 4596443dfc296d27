"""
네트워크 모듈 로더 오케스트레이터 모듈

'<저장소>><경로>' 참조를 로컬 캐시 파일로 준비한 뒤 모듈 리졸버로 로드합니다.
"""

import types
from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from ..config.settings import Settings
from ..exceptions import InvalidImportReferenceException, StorageException
from ..models.base import ImportReference, RequireOptions, RequireResult
from ..models.enums import UpdateReason
from ..utils.helpers import ensure_directory, normalize_relative_path
from ..utils.logging import get_logger
from .fetcher import HttpFetcher
from .hash_cache import HashCache
from .registry import RepositoryRegistry
from .resolver import ModuleResolver

logger = get_logger(__name__)

OptionsLike = Union[RequireOptions, Mapping[str, Any], None]


class NetRequire:
    """네트워크 모듈 로더"""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        fetcher: Optional[HttpFetcher] = None,
        resolver: Optional[ModuleResolver] = None,
    ):
        """
        네트워크 모듈 로더 초기화

        Args:
            settings: 시스템 설정 (None이면 기본 설정 사용)
            fetcher: HTTP 페처 (None이면 새로 생성)
            resolver: 모듈 리졸버 (None이면 새로 생성)
        """
        if settings is None:
            from ..config.settings import get_settings
            settings = get_settings()

        if fetcher is None:
            fetcher = HttpFetcher(settings)
        if resolver is None:
            resolver = ModuleResolver(source_extension=settings.source_extension)

        self.settings = settings
        self.logger = logger
        self.fetcher = fetcher
        self.resolver = resolver
        self.registry = RepositoryRegistry(settings, self.fetcher)
        self.hash_cache = HashCache(settings)

    async def resolve(self, import_ref: str, options: OptionsLike = None) -> RequireResult:
        """
        임포트 참조에 해당하는 로컬 파일 준비

        필요한 경우에만 원격 파일을 내려받아 덮어쓰고, 저장소 디렉토리를
        모듈 검색 경로에 추가합니다. 모듈은 실행하지 않습니다.

        Args:
            import_ref: 'repo>path/to/module' 형식의 참조
            options: 임포트 옵션

        Returns:
            RequireResult: 준비 결과 (판단 사유, 다운로드 여부 등)

        Raises:
            InvalidImportReferenceException: 참조 형식 오류 또는 저장소 밖을 가리키는 경로
            InvalidOptionsException: 알 수 없는 옵션 키 또는 잘못된 값
            RepositoryValidationException: 저장소 이름 형식 오류
            RepositoryNotFoundException: 등록되지 않은 저장소
            NetworkException: 다운로드 실패
            StorageException: 파일 쓰기 실패 또는 영속 파일 손상
        """
        options = RequireOptions.coerce(options)
        reference = self._normalize_reference(import_ref)

        base_url = self.registry.get_url(reference.repository)
        local_dir = self.registry.get_dir_path(reference.repository)

        remote_url = f"{base_url}/{reference.path}{self.settings.source_extension}"
        local_path = local_dir / reference.path

        if not local_path.is_relative_to(local_dir):
            raise InvalidImportReferenceException(import_ref)

        content: Optional[bytes] = None
        content_hash: Optional[int] = None

        if options.force_download:
            reason = UpdateReason.FORCED
        elif not local_path.exists():
            reason = UpdateReason.MISSING_LOCAL
        elif options.ignore_hash:
            reason = UpdateReason.TRUSTED_CACHE
        else:
            cached_hash = self.hash_cache.get(local_path)

            if cached_hash is None:
                reason = UpdateReason.UNVERIFIED
            else:
                # 비교용으로 받은 내용은 덮어쓰기에 재사용
                content = await self.fetcher.fetch(remote_url)
                content_hash = HashCache.generate(content)

                if content_hash != cached_hash:
                    reason = UpdateReason.HASH_MISMATCH
                else:
                    reason = UpdateReason.UP_TO_DATE

        self.logger.info(f"모듈 확인: {reference} -> {reason.value}")

        if reason.requires_download:
            if content is None:
                content = await self.fetcher.fetch(remote_url)
                content_hash = HashCache.generate(content)

            self._write_local(local_path, content)

            if not options.skip_hashing:
                self.hash_cache.add(local_path, content_hash)

            # 이전에 로드된 모듈은 새 내용으로 다시 실행되도록 캐시에서 제거
            self.resolver.unload(reference.path)

            self.logger.info(f"모듈 다운로드 완료: {remote_url} -> {local_path}")

        self.resolver.add_root(local_dir)

        return RequireResult(
            reference=reference,
            remote_url=remote_url,
            local_path=local_path,
            local_dir=local_dir,
            reason=reason,
            downloaded=reason.requires_download,
            content_hash=content_hash,
        )

    async def require(self, import_ref: str, options: OptionsLike = None) -> types.ModuleType:
        """
        원격 저장소의 모듈 임포트

        Args:
            import_ref: 'repo>path/to/module' 형식의 참조
            options: 임포트 옵션 (ignore_hash, skip_hashing, force_download)

        Returns:
            로드된 모듈

        Raises:
            NetRequireException: 참조 해석, 다운로드, 저장 또는 모듈 실행 실패
        """
        result = await self.resolve(import_ref, options)
        return self.resolver.load(result.reference.path)

    @staticmethod
    def _normalize_reference(import_ref: str) -> ImportReference:
        """임포트 참조 파싱 후 경로 정규화 (저장소 디렉토리 밖을 가리키면 거부)"""
        reference = ImportReference.parse(import_ref)
        path = normalize_relative_path(reference.path)
        if not path:
            raise InvalidImportReferenceException(import_ref)

        return ImportReference(repository=reference.repository, path=path)

    def _write_local(self, local_path: Path, content: bytes) -> None:
        """다운로드한 내용을 로컬 파일에 기록 (기존 내용 교체)"""
        try:
            ensure_directory(local_path.parent)
            local_path.write_bytes(content)
        except OSError as e:
            self.logger.error(f"모듈 파일 쓰기 실패: {local_path} - {e}")
            raise StorageException(local_path, f"파일 쓰기 실패: {e}") from e

    async def close(self) -> None:
        """리소스 정리"""
        await self.fetcher.close()

    async def __call__(self, import_ref: str, options: OptionsLike = None) -> types.ModuleType:
        return await self.require(import_ref, options)

    async def __aenter__(self):
        """비동기 컨텍스트 매니저 진입"""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """비동기 컨텍스트 매니저 종료"""
        await self.close()


@lru_cache()
def get_default_resolver(source_extension: str = ".py") -> ModuleResolver:
    """
    프로세스 전체에서 공유하는 모듈 리졸버를 반환합니다

    Args:
        source_extension: 소스 파일 확장자

    Returns:
        ModuleResolver: 공유 리졸버
    """
    return ModuleResolver(source_extension=source_extension)


# 편의 함수
async def require(
    import_ref: str,
    options: OptionsLike = None,
    settings: Optional[Settings] = None,
) -> types.ModuleType:
    """
    편의 함수: 원격 모듈 임포트

    공유 리졸버를 사용하므로 같은 모듈은 프로세스 안에서 한 번만 실행됩니다.

    Args:
        import_ref: 'repo>path/to/module' 형식의 참조
        options: 임포트 옵션
        settings: 시스템 설정

    Returns:
        로드된 모듈
    """
    if settings is None:
        from ..config.settings import get_settings
        settings = get_settings()

    resolver = get_default_resolver(settings.source_extension)
    async with NetRequire(settings, resolver=resolver) as loader:
        return await loader.require(import_ref, options)
