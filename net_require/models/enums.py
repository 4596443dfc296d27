"""
열거형 정의 모듈

net-require 에서 사용되는 상수 값들을 열거형으로 정의합니다.
"""

from enum import Enum


class UpdateReason(Enum):
    """로컬 파일 갱신 판단 사유 열거형"""
    FORCED = "forced"                  # force_download 옵션
    MISSING_LOCAL = "missing_local"    # 로컬 파일 없음
    UNVERIFIED = "unverified"          # 해시 캐시 항목 없음
    HASH_MISMATCH = "hash_mismatch"    # 원격 내용 변경
    UP_TO_DATE = "up_to_date"          # 원격 해시와 일치
    TRUSTED_CACHE = "trusted_cache"    # ignore_hash 옵션, 네트워크 미사용

    @property
    def requires_download(self) -> bool:
        """로컬 파일을 덮어써야 하는 사유인지 여부"""
        return self in (
            UpdateReason.FORCED,
            UpdateReason.MISSING_LOCAL,
            UpdateReason.UNVERIFIED,
            UpdateReason.HASH_MISMATCH,
        )
