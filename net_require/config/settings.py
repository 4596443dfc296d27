"""
설정 관리 모듈

환경 변수(NET_REQUIRE_ 접두사)를 통한 net-require 설정을 관리합니다.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings

from ..exceptions import ConfigurationException


class Settings(BaseSettings):
    """net-require 설정 관리 클래스"""

    # 영속 파일 설정
    persistent_dir: str = Field(
        default="~/.net-require",
        description="모든 영속 파일을 보관하는 디렉토리"
    )
    repository_file: Optional[str] = Field(
        default=None,
        description="저장소 목록 파일 경로 (기본: <persistent_dir>/repositories.json)"
    )
    hash_file: Optional[str] = Field(
        default=None,
        description="해시 캐시 파일 경로 (기본: <persistent_dir>/hashes.json)"
    )
    download_dir: Optional[str] = Field(
        default=None,
        description="다운로드 파일 디렉토리 (기본: <persistent_dir>/downloads)"
    )
    install_path: Optional[str] = Field(
        default=None,
        description="설치 스크립트 경로 재정의 (기본: <persistent_dir>/net_require.py)"
    )

    # 모듈 설정
    source_extension: str = Field(
        default=".py",
        description="원격 소스 파일 확장자"
    )

    # HTTP 설정
    http_timeout: int = Field(
        default=30,
        description="HTTP 요청 타임아웃 (초)"
    )
    http_user_agent: str = Field(
        default="net-require/1.0",
        description="HTTP User-Agent 헤더"
    )

    # 로깅 설정
    log_level: str = Field(
        default="INFO",
        description="로그 레벨"
    )
    log_format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="로그 포맷"
    )
    log_file: Optional[str] = Field(
        default=None,
        description="로그 파일 경로"
    )

    class Config:
        env_prefix = "NET_REQUIRE_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"
        case_sensitive = False

    def get_persistent_dir(self) -> Path:
        """영속 디렉토리의 절대 경로"""
        return Path(self.persistent_dir).expanduser().resolve()

    def get_repository_file_path(self) -> Path:
        """저장소 목록 파일 경로"""
        if self.repository_file:
            return Path(self.repository_file).expanduser().resolve()
        return self.get_persistent_dir() / "repositories.json"

    def get_hash_file_path(self) -> Path:
        """해시 캐시 파일 경로"""
        if self.hash_file:
            return Path(self.hash_file).expanduser().resolve()
        return self.get_persistent_dir() / "hashes.json"

    def get_download_dir(self) -> Path:
        """다운로드 파일 디렉토리"""
        if self.download_dir:
            return Path(self.download_dir).expanduser().resolve()
        return self.get_persistent_dir() / "downloads"

    def get_install_path(self) -> Path:
        """설치 스크립트 경로"""
        if self.install_path:
            return Path(self.install_path).expanduser().resolve()
        return self.get_persistent_dir() / "net_require.py"

    def validate_configuration(self) -> None:
        """설정 유효성 검증"""
        if not self.source_extension.startswith("."):
            raise ConfigurationException(
                "NET_REQUIRE_SOURCE_EXTENSION", "확장자는 '.'으로 시작해야 합니다"
            )

        if self.http_timeout <= 0:
            raise ConfigurationException(
                "NET_REQUIRE_HTTP_TIMEOUT", "타임아웃은 0보다 커야 합니다"
            )


@lru_cache()
def get_settings() -> Settings:
    """
    설정 인스턴스를 반환합니다 (싱글톤 패턴)

    Returns:
        Settings: 설정 인스턴스
    """
    settings = Settings()
    settings.validate_configuration()
    return settings
