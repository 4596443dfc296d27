"""
예외 클래스 정의 모듈

net-require 에서 사용되는 커스텀 예외들을 정의합니다.

검증 오류, 네트워크 오류, 저장소(파일) 오류를 구분하여 호출자가
네트워크 오류만 재시도하고 검증 오류는 즉시 실패로 처리할 수 있도록 합니다.
"""

from pathlib import Path
from typing import Optional, Union


class NetRequireException(Exception):
    """net-require 기본 예외 클래스"""

    retryable = False

    def __init__(self, message: str, error_code: Optional[str] = None):
        """
        예외 초기화

        Args:
            message: 오류 메시지
            error_code: 오류 코드 (선택사항)
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code


class NetRequireValidationException(NetRequireException):
    """입력값 검증 실패 예외 (재시도 불가)"""


class RepositoryValidationException(NetRequireValidationException):
    """저장소 이름 또는 URL 형식이 잘못되었을 때 발생하는 예외"""

    def __init__(self, field: str, value: object):
        """
        저장소 검증 예외 초기화

        Args:
            field: 검증에 실패한 필드 (name, url)
            value: 입력된 값
        """
        message = f"잘못된 저장소 {field}: {value!r}"
        super().__init__(message, "INVALID_REPOSITORY")
        self.field = field
        self.value = value


class InvalidImportReferenceException(NetRequireValidationException):
    """임포트 참조 문자열 형식이 잘못되었을 때 발생하는 예외"""

    def __init__(self, reference: object):
        message = f"잘못된 임포트 참조 (형식: '<저장소>><경로>'): {reference!r}"
        super().__init__(message, "INVALID_IMPORT_REFERENCE")
        self.reference = reference


class InvalidOptionsException(NetRequireValidationException):
    """임포트 옵션에 알 수 없는 키나 잘못된 값이 있을 때 발생하는 예외"""

    def __init__(self, options: object, error_detail: str):
        message = f"잘못된 임포트 옵션: {options!r} - {error_detail}"
        super().__init__(message, "INVALID_OPTIONS")
        self.options = options
        self.error_detail = error_detail


class RepositoryNotFoundException(NetRequireException):
    """등록되지 않은 저장소를 조회할 때 발생하는 예외"""

    def __init__(self, name: str):
        message = f"저장소를 찾을 수 없습니다: {name}"
        super().__init__(message, "REPOSITORY_NOT_FOUND")
        self.name = name


class RepositoryExistsException(NetRequireException):
    """이미 등록된 저장소 이름으로 추가할 때 발생하는 예외"""

    def __init__(self, name: str):
        message = f"이미 존재하는 저장소입니다: {name}"
        super().__init__(message, "REPOSITORY_EXISTS")
        self.name = name


class NetworkException(NetRequireException):
    """HTTP 요청 실패 시 발생하는 예외 (재시도 가능)"""

    retryable = True

    def __init__(self, url: str, error_detail: str, status: Optional[int] = None):
        """
        네트워크 예외 초기화

        Args:
            url: 요청 URL
            error_detail: 오류 상세 정보
            status: HTTP 상태 코드 (응답을 받은 경우)
        """
        status_info = f" (HTTP {status})" if status is not None else ""
        message = f"네트워크 오류{status_info}: {url} - {error_detail}"
        super().__init__(message, "NETWORK_ERROR")
        self.url = url
        self.error_detail = error_detail
        self.status = status


class StorageException(NetRequireException):
    """로컬 파일 읽기/쓰기 실패 시 발생하는 예외"""

    label = "저장소 파일 오류"

    def __init__(self, path: Union[str, Path], error_detail: str):
        message = f"{self.label}: {path} - {error_detail}"
        super().__init__(message, "STORAGE_ERROR")
        self.path = str(path)
        self.error_detail = error_detail


class CorruptedStoreException(StorageException):
    """영속 파일의 내용이 손상되었을 때 발생하는 예외"""

    label = "손상된 영속 파일"

    def __init__(self, path: Union[str, Path], error_detail: str):
        super().__init__(path, error_detail)
        self.error_code = "CORRUPTED_STORE"


class ModuleLoadException(NetRequireException):
    """모듈을 찾거나 실행하지 못했을 때 발생하는 예외"""

    def __init__(self, module_name: str, error_detail: str):
        message = f"모듈 로드 실패: {module_name} - {error_detail}"
        super().__init__(message, "MODULE_LOAD_ERROR")
        self.module_name = module_name
        self.error_detail = error_detail


class ConfigurationException(NetRequireException):
    """설정 오류 시 발생하는 예외"""

    def __init__(self, config_key: str, error_detail: str):
        """
        설정 예외 초기화

        Args:
            config_key: 설정 키
            error_detail: 오류 상세 정보
        """
        message = f"설정 오류: {config_key} - {error_detail}"
        super().__init__(message, "CONFIGURATION_ERROR")
        self.config_key = config_key
        self.error_detail = error_detail
