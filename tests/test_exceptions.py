"""
예외 클래스 테스트 모듈

net-require 의 커스텀 예외들을 테스트합니다.
"""

import pytest

from net_require.exceptions import (
    ConfigurationException,
    CorruptedStoreException,
    InvalidImportReferenceException,
    InvalidOptionsException,
    ModuleLoadException,
    NetRequireException,
    NetRequireValidationException,
    NetworkException,
    RepositoryExistsException,
    RepositoryNotFoundException,
    RepositoryValidationException,
    StorageException,
)


class TestNetRequireException:
    """기본 예외 클래스 테스트"""

    def test_basic_exception(self):
        """기본 예외 생성 테스트"""
        exc = NetRequireException("테스트 오류")

        assert str(exc) == "테스트 오류"
        assert exc.message == "테스트 오류"
        assert exc.error_code is None
        assert exc.retryable is False

    def test_exception_with_error_code(self):
        """오류 코드 포함 예외 테스트"""
        exc = NetRequireException("테스트 오류", "TEST_ERROR")

        assert exc.error_code == "TEST_ERROR"


class TestValidationExceptions:
    """검증 예외 테스트"""

    def test_repository_validation(self):
        """저장소 검증 예외"""
        exc = RepositoryValidationException("name", "Bad")

        assert "잘못된 저장소 name: 'Bad'" in str(exc)
        assert exc.field == "name"
        assert exc.value == "Bad"
        assert exc.error_code == "INVALID_REPOSITORY"
        assert isinstance(exc, NetRequireValidationException)
        assert exc.retryable is False

    def test_invalid_import_reference(self):
        """임포트 참조 예외"""
        exc = InvalidImportReferenceException("nope")

        assert "'nope'" in str(exc)
        assert exc.reference == "nope"
        assert exc.error_code == "INVALID_IMPORT_REFERENCE"
        assert isinstance(exc, NetRequireValidationException)

    def test_invalid_options(self):
        """임포트 옵션 예외"""
        exc = InvalidOptionsException({"bogus": True}, "알 수 없는 키")

        assert "bogus" in str(exc)
        assert exc.options == {"bogus": True}
        assert exc.error_code == "INVALID_OPTIONS"
        assert isinstance(exc, NetRequireValidationException)
        assert exc.retryable is False


class TestRepositoryExceptions:
    """저장소 존재 여부 예외 테스트"""

    def test_not_found(self):
        """저장소 없음"""
        exc = RepositoryNotFoundException("acme")

        assert "저장소를 찾을 수 없습니다: acme" in str(exc)
        assert exc.name == "acme"
        assert exc.error_code == "REPOSITORY_NOT_FOUND"

    def test_exists(self):
        """저장소 중복"""
        exc = RepositoryExistsException("acme")

        assert "이미 존재하는 저장소입니다: acme" in str(exc)
        assert exc.error_code == "REPOSITORY_EXISTS"


class TestNetworkException:
    """네트워크 예외 테스트"""

    def test_with_status(self):
        """상태 코드 포함"""
        exc = NetworkException("http://example.test/a.py", "요청 실패", status=404)

        assert "(HTTP 404)" in str(exc)
        assert exc.url == "http://example.test/a.py"
        assert exc.status == 404
        assert exc.error_code == "NETWORK_ERROR"
        assert exc.retryable is True

    def test_without_status(self):
        """연결 실패"""
        exc = NetworkException("http://example.test", "연결 거부")

        assert "(HTTP" not in str(exc)
        assert exc.status is None


class TestStorageExceptions:
    """저장소 파일 예외 테스트"""

    def test_storage(self):
        """파일 오류"""
        exc = StorageException("/tmp/x.json", "쓰기 실패")

        assert str(exc) == "저장소 파일 오류: /tmp/x.json - 쓰기 실패"
        assert exc.path == "/tmp/x.json"
        assert exc.error_code == "STORAGE_ERROR"

    def test_corrupted(self):
        """손상된 파일"""
        exc = CorruptedStoreException("/tmp/x.json", "JSON 파싱 오류")

        assert str(exc) == "손상된 영속 파일: /tmp/x.json - JSON 파싱 오류"
        assert exc.error_code == "CORRUPTED_STORE"
        assert isinstance(exc, StorageException)


class TestOtherExceptions:
    """기타 예외 테스트"""

    def test_module_load(self):
        """모듈 로드 예외"""
        exc = ModuleLoadException("lib/util", "없음")

        assert exc.module_name == "lib/util"
        assert exc.error_code == "MODULE_LOAD_ERROR"

    def test_configuration(self):
        """설정 예외"""
        exc = ConfigurationException("NET_REQUIRE_HTTP_TIMEOUT", "잘못된 값")

        assert "설정 오류: NET_REQUIRE_HTTP_TIMEOUT - 잘못된 값" in str(exc)
        assert exc.error_code == "CONFIGURATION_ERROR"

    @pytest.mark.parametrize(
        "exc",
        [
            RepositoryValidationException("url", ""),
            InvalidImportReferenceException(""),
            RepositoryNotFoundException("a"),
            RepositoryExistsException("a"),
            NetworkException("u", "d"),
            StorageException("p", "d"),
            CorruptedStoreException("p", "d"),
            ModuleLoadException("m", "d"),
            ConfigurationException("k", "d"),
        ],
    )
    def test_inheritance(self, exc):
        """모든 예외는 기본 예외를 상속"""
        assert isinstance(exc, NetRequireException)
        assert isinstance(exc, Exception)
