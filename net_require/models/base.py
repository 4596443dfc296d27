"""
기본 데이터 모델 모듈

저장소, 해시 캐시 항목, 임포트 참조 및 옵션 모델을 정의합니다.
"""

from pathlib import Path
from typing import Any, Mapping, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError

from ..exceptions import InvalidImportReferenceException, InvalidOptionsException
from .enums import UpdateReason

REPOSITORY_NAME_PATTERN = r"^[a-z][a-z0-9]*[a-z0-9]$"
IMPORT_SEPARATOR = ">"


class Repository(BaseModel):
    """등록된 원격 저장소"""

    name: str = Field(
        ...,
        description="저장소 이름 (소문자/숫자, 2자 이상, 숫자로 시작 불가)",
        pattern=REPOSITORY_NAME_PATTERN,
        min_length=2
    )
    url: str = Field(
        ...,
        description="저장소 기본 URL (끝의 '/' 제거됨)",
        min_length=1
    )


class HashEntry(BaseModel):
    """해시 캐시 항목"""

    path: str = Field(..., description="다운로드된 파일의 절대 경로")
    hash: int = Field(..., description="마지막으로 확인된 내용의 djb2 해시")


class ImportReference(BaseModel):
    """'<저장소>><경로>' 형식의 임포트 참조"""

    repository: str = Field(..., description="저장소 이름", min_length=1)
    path: str = Field(..., description="확장자 없는 상대 경로", min_length=1)

    @classmethod
    def parse(cls, reference: Any) -> "ImportReference":
        """
        임포트 참조 문자열 파싱

        첫 번째 '>' 를 기준으로 저장소 이름과 상대 경로를 나눕니다.
        경로는 비어있지 않은지만 확인합니다.

        Args:
            reference: 'repo>path/to/module' 형식 문자열

        Returns:
            ImportReference: 파싱된 참조

        Raises:
            InvalidImportReferenceException: 형식이 잘못되었을 때
        """
        if not isinstance(reference, str):
            raise InvalidImportReferenceException(reference)

        repository, separator, path = reference.partition(IMPORT_SEPARATOR)
        if not separator or not repository or not path:
            raise InvalidImportReferenceException(reference)

        return cls(repository=repository, path=path)

    def __str__(self) -> str:
        return f"{self.repository}{IMPORT_SEPARATOR}{self.path}"


class RequireOptions(BaseModel):
    """모듈 임포트 옵션 (모든 값의 기본값은 False)"""

    model_config = ConfigDict(extra="forbid")

    ignore_hash: bool = Field(
        default=False,
        validation_alias=AliasChoices("ignore_hash", "ignoreHash"),
        description="로컬 파일이 있으면 해시 확인 없이 그대로 사용 (네트워크 미사용)"
    )
    skip_hashing: bool = Field(
        default=False,
        validation_alias=AliasChoices("skip_hashing", "skipHashing"),
        description="다운로드한 내용의 해시를 캐시에 기록하지 않음"
    )
    force_download: bool = Field(
        default=False,
        validation_alias=AliasChoices("force_download", "forceDownload"),
        description="캐시 상태와 무관하게 항상 다시 다운로드"
    )

    @classmethod
    def coerce(
        cls, options: Union["RequireOptions", Mapping[str, Any], None]
    ) -> "RequireOptions":
        """
        옵션 객체, 딕셔너리 또는 None 을 RequireOptions 로 변환

        딕셔너리 키는 ignore_hash 또는 ignoreHash 형식을 모두 허용합니다.

        Raises:
            InvalidOptionsException: 알 수 없는 키 또는 잘못된 값
        """
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        if not isinstance(options, Mapping):
            raise InvalidOptionsException(options, "딕셔너리 형식이 아닙니다")

        try:
            return cls.model_validate(dict(options))
        except ValidationError as e:
            raise InvalidOptionsException(options, str(e)) from e


class RequireResult(BaseModel):
    """모듈 파일 준비 결과"""

    reference: ImportReference
    remote_url: str
    local_path: Path
    local_dir: Path
    reason: UpdateReason
    downloaded: bool = False
    content_hash: Optional[int] = None
