"""
모듈 리졸버 테스트 모듈

검색 경로 관리와 모듈 파일 실행을 테스트합니다.
"""

import pytest

from net_require.exceptions import ModuleLoadException
from net_require.loader.resolver import ModuleResolver


class TestModuleResolver:
    """모듈 리졸버 테스트"""

    @pytest.fixture
    def resolver(self):
        """리졸버 픽스처"""
        return ModuleResolver()

    def test_add_root_once(self, resolver, tmp_path):
        """같은 경로는 한 번만 추가"""
        assert resolver.add_root(tmp_path) is True
        assert resolver.add_root(str(tmp_path)) is False

        assert resolver.roots == [tmp_path]

    def test_prefix_path_not_duplicate(self, resolver, tmp_path):
        """접두사가 같은 다른 경로는 별도로 추가"""
        resolver.add_root(tmp_path / "repoab")
        resolver.add_root(tmp_path / "repo")

        assert resolver.roots == [tmp_path / "repoab", tmp_path / "repo"]

    def test_initial_roots(self, tmp_path):
        """생성 시 검색 경로 지정"""
        resolver = ModuleResolver([tmp_path, tmp_path])

        assert resolver.roots == [tmp_path]

    def test_find_without_extension(self, resolver, tmp_path):
        """확장자 없는 파일 찾기"""
        (tmp_path / "foo").write_text("value = 1\n", encoding="utf-8")
        resolver.add_root(tmp_path)

        assert resolver.find("foo") == tmp_path / "foo"

    def test_find_with_extension(self, resolver, tmp_path):
        """확장자가 붙은 파일 찾기"""
        (tmp_path / "bar.py").write_text("value = 2\n", encoding="utf-8")
        resolver.add_root(tmp_path)

        assert resolver.find("bar") == tmp_path / "bar.py"

    def test_find_search_order(self, resolver, tmp_path):
        """먼저 추가된 경로가 우선"""
        first = tmp_path / "first"
        second = tmp_path / "second"
        for root in (first, second):
            root.mkdir()
            (root / "foo").write_text(f"origin = {root.name!r}\n", encoding="utf-8")
        resolver.add_root(first)
        resolver.add_root(second)

        assert resolver.load("foo").origin == "first"

    def test_same_name_in_two_roots(self, resolver, tmp_path):
        """같은 이름이 여러 루트에 있으면 다시 로드해도 먼저 추가된 루트 사용"""
        first = tmp_path / "acme"
        second = tmp_path / "beta"
        for root in (first, second):
            root.mkdir()
            (root / "foo").write_text(f"origin = {root.name!r}\n", encoding="utf-8")
        resolver.add_root(first)
        resolver.add_root(second)
        resolver.load("foo")

        resolver.unload("foo")

        assert resolver.find("foo") == first / "foo"
        assert resolver.load("foo").origin == "acme"

    def test_find_missing(self, resolver, tmp_path):
        """파일이 없으면 로드 예외"""
        resolver.add_root(tmp_path)

        with pytest.raises(ModuleLoadException) as exc_info:
            resolver.find("missing")

        assert exc_info.value.module_name == "missing"
        assert exc_info.value.error_code == "MODULE_LOAD_ERROR"

    def test_load_module(self, resolver, tmp_path):
        """모듈 실행 후 반환"""
        (tmp_path / "lib").mkdir()
        (tmp_path / "lib" / "util").write_text(
            "def double(x):\n    return x * 2\n", encoding="utf-8"
        )
        resolver.add_root(tmp_path)

        module = resolver.load("lib/util")

        assert module.__name__ == "lib.util"
        assert module.__file__ == str(tmp_path / "lib" / "util")
        assert module.double(21) == 42

    def test_load_cached(self, resolver, tmp_path):
        """한 번 로드한 모듈은 다시 실행하지 않음"""
        module_file = tmp_path / "foo"
        module_file.write_text("value = 1\n", encoding="utf-8")
        resolver.add_root(tmp_path)

        first = resolver.load("foo")
        module_file.write_text("value = 2\n", encoding="utf-8")
        second = resolver.load("foo")

        assert first is second
        assert second.value == 1
        assert resolver.is_loaded("foo") is True

    def test_unload(self, resolver, tmp_path):
        """캐시 제거 후에는 다시 실행"""
        module_file = tmp_path / "foo"
        module_file.write_text("value = 1\n", encoding="utf-8")
        resolver.add_root(tmp_path)
        resolver.load("foo")

        module_file.write_text("value = 2\n", encoding="utf-8")
        resolver.unload("foo")

        assert resolver.load("foo").value == 2

    def test_load_execution_error(self, resolver, tmp_path):
        """실행 중 오류는 로드 예외로 감싸고 캐시하지 않음"""
        (tmp_path / "broken").write_text("raise RuntimeError('boom')\n", encoding="utf-8")
        resolver.add_root(tmp_path)

        with pytest.raises(ModuleLoadException) as exc_info:
            resolver.load("broken")

        assert isinstance(exc_info.value.__cause__, RuntimeError)
        assert resolver.is_loaded("broken") is False

    def test_load_syntax_error(self, resolver, tmp_path):
        """문법 오류도 로드 예외"""
        (tmp_path / "bad").write_text("def (:\n", encoding="utf-8")
        resolver.add_root(tmp_path)

        with pytest.raises(ModuleLoadException):
            resolver.load("bad")
