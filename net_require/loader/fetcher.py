"""
HTTP 페처 모듈

원격 저장소에서 모듈 소스를 내려받는 HTTP GET 래퍼를 제공합니다.
"""

import asyncio
from typing import Optional

import aiohttp

from ..config.settings import Settings
from ..exceptions import NetworkException
from ..utils.helpers import has_http_scheme
from ..utils.logging import get_logger

logger = get_logger(__name__)


class HttpFetcher:
    """HTTP 페처 클래스"""

    def __init__(self, settings: Settings):
        """
        HTTP 페처 초기화

        Args:
            settings: 시스템 설정
        """
        self.settings = settings
        self.logger = logger
        self.session: Optional[aiohttp.ClientSession] = None

    async def _get_session(self) -> aiohttp.ClientSession:
        """HTTP 세션 생성"""
        if self.session is None or self.session.closed:
            self.session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.settings.http_timeout),
                headers={
                    'User-Agent': self.settings.http_user_agent
                }
            )
        return self.session

    async def fetch(self, url: str) -> bytes:
        """
        URL 의 내용을 내려받기

        Args:
            url: 요청 URL

        Returns:
            bytes: 응답 본문 (본문이 없으면 b"")

        Raises:
            NetworkException: 연결 실패 또는 2xx 가 아닌 응답
        """
        session = await self._get_session()
        self.logger.debug(f"다운로드 요청: {url}")

        try:
            async with session.get(url) as response:
                if not 200 <= response.status < 300:
                    raise NetworkException(url, "요청 실패", status=response.status)

                content = await response.read()

        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            self.logger.error(f"다운로드 오류: {url} - {e}")
            raise NetworkException(url, str(e) or type(e).__name__) from e

        content = content or b""
        self.logger.debug(f"다운로드 완료: {url} ({len(content)} bytes)")
        return content

    async def check_url(self, url: str) -> None:
        """
        URL 사전 연결 확인

        http/https URL 인지 확인한 뒤 HEAD 요청을 보냅니다.
        HTTP 응답을 받기만 하면 상태 코드와 무관하게 연결 가능으로 간주합니다.

        Args:
            url: 확인할 URL

        Raises:
            NetworkException: 지원하지 않는 URL 이거나 연결할 수 없을 때
        """
        if not has_http_scheme(url):
            raise NetworkException(url, "http/https URL 만 지원합니다")

        session = await self._get_session()

        try:
            async with session.head(url, allow_redirects=True) as response:
                self.logger.debug(f"URL 확인: {url} (HTTP {response.status})")

        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            self.logger.error(f"URL 연결 불가: {url} - {e}")
            raise NetworkException(url, f"연결할 수 없습니다: {e}") from e

    async def close(self) -> None:
        """세션 정리"""
        if self.session is not None and not self.session.closed:
            await self.session.close()
        self.session = None

    async def __aenter__(self):
        """비동기 컨텍스트 매니저 진입"""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """비동기 컨텍스트 매니저 종료"""
        await self.close()
