"""
모듈 리졸버 모듈

루트 디렉토리 목록에서 이름으로 모듈 파일을 찾아 실행합니다.
전역 sys.path 를 수정하지 않고 명시적인 검색 경로를 사용합니다.
"""

import types
from pathlib import Path
from typing import Iterable, Optional, Union

from ..exceptions import ModuleLoadException
from ..utils.helpers import module_name_from_path
from ..utils.logging import get_logger

logger = get_logger(__name__)


class ModuleResolver:
    """이름 기반 모듈 로더"""

    def __init__(
        self,
        roots: Optional[Iterable[Union[str, Path]]] = None,
        source_extension: str = ".py",
    ):
        """
        모듈 리졸버 초기화

        Args:
            roots: 초기 검색 디렉토리 목록 (순서 유지)
            source_extension: 소스 파일 확장자
        """
        self.source_extension = source_extension
        self.logger = logger
        self._roots: list[Path] = []
        self._modules: dict[str, types.ModuleType] = {}

        for root in roots or ():
            self.add_root(root)

    @property
    def roots(self) -> list[Path]:
        """검색 디렉토리 목록 (복사본)"""
        return list(self._roots)

    def add_root(self, path: Union[str, Path]) -> bool:
        """
        검색 디렉토리 추가 (이미 있으면 무시)

        Returns:
            bool: 새로 추가되었는지 여부
        """
        root = Path(path)
        if root in self._roots:
            return False

        self._roots.append(root)
        self.logger.debug(f"모듈 검색 경로 추가: {root}")
        return True

    def find(self, name: str) -> Path:
        """
        모듈 파일 찾기

        각 루트에서 '<root>/<name>' 과 '<root>/<name><확장자>' 순으로 찾습니다.
        이름은 루트 구분 없이 전역이므로, 여러 저장소에 같은 이름의 모듈이
        있으면 먼저 추가된 루트의 파일이 선택됩니다.

        Raises:
            ModuleLoadException: 어느 루트에서도 찾지 못했을 때
        """
        for root in self._roots:
            for candidate in (root / name, root / f"{name}{self.source_extension}"):
                if candidate.is_file():
                    return candidate

        searched = ", ".join(str(root) for root in self._roots) or "(없음)"
        raise ModuleLoadException(name, f"모듈 파일을 찾을 수 없습니다 (검색 경로: {searched})")

    def is_loaded(self, name: str) -> bool:
        """이미 로드된 모듈인지 여부"""
        return name in self._modules

    def load(self, name: str) -> types.ModuleType:
        """
        모듈 로드

        이미 로드된 이름이면 캐시된 모듈을 그대로 반환합니다.

        Args:
            name: 확장자 없는 상대 경로

        Returns:
            실행된 모듈 객체

        Raises:
            ModuleLoadException: 파일을 찾지 못했거나 실행 중 오류가 발생했을 때
        """
        if name in self._modules:
            return self._modules[name]

        path = self.find(name)
        module = types.ModuleType(module_name_from_path(name) or name)
        module.__file__ = str(path)

        try:
            source = path.read_bytes()
            code = compile(source, str(path), "exec")
            exec(code, module.__dict__)
        except Exception as e:
            self.logger.error(f"모듈 실행 오류: {name} ({path}) - {e}")
            raise ModuleLoadException(name, f"{type(e).__name__}: {e}") from e

        self._modules[name] = module
        self.logger.debug(f"모듈 로드 완료: {name} -> {path}")
        return module

    def unload(self, name: str) -> None:
        """로드된 모듈 캐시에서 제거 (다음 load 시 다시 실행)"""
        self._modules.pop(name, None)
