"""
해시 캐시 모듈

다운로드한 파일의 로컬 경로와 내용 해시를 매핑하여 변경 감지에 사용합니다.
"""

from pathlib import Path
from typing import Optional, Union

from ..config.settings import Settings
from ..models.base import HashEntry
from ..utils.logging import get_logger
from .store import JsonFileStore

logger = get_logger(__name__)

DJB2_SEED = 5381
DJB2_MODULUS = 2 ** 31


def generate_hash(data: Union[bytes, str]) -> int:
    """
    djb2 변형 해시 계산

    누산기는 5381 에서 시작하며 바이트마다 (acc * 33 + byte) mod 2^31 을 적용합니다.

    암호학적으로 안전하지 않습니다! 변경 감지 용도로만 사용하세요.

    Args:
        data: 해시할 내용 (문자열은 UTF-8 로 인코딩)

    Returns:
        int: 31비트 범위의 해시값
    """
    if isinstance(data, str):
        data = data.encode('utf-8')

    value = DJB2_SEED
    for byte in data:
        value = (value * 33 + byte) % DJB2_MODULUS
    return value


def _is_valid_entry(path, file_hash) -> bool:
    # bool 은 int 의 하위 클래스이므로 제외
    return (
        isinstance(path, str)
        and isinstance(file_hash, int)
        and not isinstance(file_hash, bool)
    )


class HashCache:
    """해시 캐시 관리자"""

    generate = staticmethod(generate_hash)

    def __init__(self, settings: Settings):
        """
        해시 캐시 초기화

        Args:
            settings: 시스템 설정
        """
        self.settings = settings
        self.logger = logger
        self.store = JsonFileStore(settings.get_hash_file_path(), _is_valid_entry)

    def add(self, path: Union[str, Path], file_hash: int) -> None:
        """해시 기록 (기존 값은 덮어씀)"""
        hashes = self.store.load()
        hashes[str(path)] = file_hash
        self.store.save(hashes)
        self.logger.debug(f"해시 기록: {path} -> {file_hash}")

    def has(self, path: Union[str, Path]) -> bool:
        """해시 기록 여부"""
        return str(path) in self.store.load()

    def get(self, path: Union[str, Path]) -> Optional[int]:
        """기록된 해시 (없으면 None)"""
        return self.store.load().get(str(path))

    def remove(self, path: Union[str, Path]) -> None:
        """해시 기록 삭제 (없으면 아무것도 하지 않음)"""
        hashes = self.store.load()
        if hashes.pop(str(path), None) is not None:
            self.logger.debug(f"해시 삭제: {path}")
        self.store.save(hashes)

    def list_entries(self) -> list[HashEntry]:
        """
        기록된 해시 목록 조회

        Returns:
            경로 순으로 정렬된 해시 항목 목록
        """
        hashes = self.store.load()
        return [HashEntry(path=path, hash=value) for path, value in sorted(hashes.items())]
