#!/usr/bin/env python3
"""
net-require 사용 예제

저장소를 등록하고 원격 모듈을 임포트하는 방법을 보여줍니다.
"""

import asyncio
import tempfile

from net_require import NetRequire, RequireOptions
from net_require.config.settings import Settings
from net_require.exceptions import NetRequireException
from net_require.utils.logging import setup_logging

REPOSITORY_URL = "https://raw.githubusercontent.com/example/scripts/main/python"


async def basic_usage_example():
    """기본 사용법 예제"""
    print("=== net-require 기본 사용법 ===")

    settings = Settings(persistent_dir=tempfile.mkdtemp(), log_level="DEBUG")
    setup_logging(settings)

    async with NetRequire(settings) as net_require:
        # 저장소 등록 (이미 있으면 건너뜀)
        if not net_require.registry.has("example"):
            await net_require.registry.add("example", REPOSITORY_URL)

        print("\n1. 등록된 저장소")
        for repository in net_require.registry.list_repositories():
            print(f"- {repository.name}: {repository.url}")

        print("\n2. 모듈 임포트")
        module = await net_require("example>library/greeting")
        print(f"모듈: {module.__name__} ({module.__file__})")

        print("\n3. 네트워크 없이 캐시 사용")
        result = await net_require.resolve(
            "example>library/greeting", RequireOptions(ignore_hash=True)
        )
        print(f"판단 사유: {result.reason.value}")

        print("\n4. 해시 캐시")
        for entry in net_require.hash_cache.list_entries():
            print(f"- {entry.path}: {entry.hash}")


async def main():
    """예제 실행"""
    try:
        await basic_usage_example()
    except NetRequireException as e:
        print(f"오류 ({e.error_code}): {e.message}")


if __name__ == "__main__":
    asyncio.run(main())
