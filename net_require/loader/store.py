"""
영속 키-값 저장소 모듈

평면 딕셔너리를 JSON 파일로 저장하고 불러옵니다.
저장소 목록과 해시 캐시가 이 모듈 위에 구현됩니다.
"""

import json
from pathlib import Path
from typing import Any, Callable, Optional, Union

from ..exceptions import CorruptedStoreException, StorageException
from ..utils.helpers import ensure_directory
from ..utils.logging import get_logger

logger = get_logger(__name__)

EntryValidator = Callable[[Any, Any], bool]


class JsonFileStore:
    """JSON 파일 기반 키-값 저장소"""

    def __init__(self, path: Union[str, Path], validate: Optional[EntryValidator] = None):
        """
        저장소 초기화

        Args:
            path: JSON 파일 경로
            validate: 항목별 검증 함수 (key, value) -> bool
        """
        self.path = Path(path)
        self.validate = validate
        self.logger = logger

    def load(self) -> dict:
        """
        저장된 딕셔너리 로드

        파일이 없거나 비어 있으면 빈 딕셔너리를 반환합니다.

        Returns:
            dict: 저장된 항목

        Raises:
            CorruptedStoreException: JSON 형식 오류 또는 잘못된 항목
            StorageException: 파일 읽기 실패
        """
        if not self.path.exists():
            return {}

        try:
            content = self.path.read_text(encoding='utf-8')
        except OSError as e:
            raise StorageException(self.path, f"파일 읽기 실패: {e}") from e

        if not content.strip():
            return {}

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise CorruptedStoreException(self.path, f"JSON 파싱 오류: {e}") from e

        if not isinstance(data, dict):
            raise CorruptedStoreException(self.path, "최상위 값이 객체가 아닙니다")

        if self.validate is not None:
            for key, value in data.items():
                if not self.validate(key, value):
                    raise CorruptedStoreException(self.path, f"잘못된 항목: {key!r} -> {value!r}")

        return data

    def save(self, data: dict) -> None:
        """
        딕셔너리를 JSON 파일로 저장 (기존 파일 덮어쓰기)

        Args:
            data: 저장할 항목

        Raises:
            StorageException: 파일 쓰기 실패
        """
        try:
            ensure_directory(self.path.parent)
            with open(self.path, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise StorageException(self.path, f"파일 쓰기 실패: {e}") from e

        self.logger.debug(f"영속 파일 저장: {self.path} ({len(data)}개 항목)")
