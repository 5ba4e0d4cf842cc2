"""
Telegram Bot API 연동

채널 구독 여부 확인(getChatMember)만 담당합니다.
"""
import asyncio
import logging
from typing import Optional

import requests

from config.database import get_bot_token, get_channel_username
from exceptions import UpstreamUnavailableError

logger = logging.getLogger(__name__)

TELEGRAM_API_BASE = "https://api.telegram.org"

# 구독으로 인정하는 멤버 상태
SUBSCRIBED_STATUSES = frozenset({"member", "administrator", "creator"})


class TelegramSubscriptionChecker:
    """
    채널 구독 검증기

    인스턴스 자체를 TaskService.claim_channel_subscription의 검증기로 넘길 수 있습니다.
    네트워크/API 실패는 False가 아니라 UpstreamUnavailableError로 올립니다.
    """

    def __init__(
        self,
        bot_token: Optional[str] = None,
        channel: Optional[str] = None,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None
    ):
        self.bot_token = bot_token if bot_token is not None else get_bot_token()
        self.channel = channel or get_channel_username()
        self.timeout = timeout
        self.session = session or requests.Session()

    async def __call__(self, telegram_id: str) -> bool:
        return await self.is_subscribed(telegram_id)

    async def is_subscribed(self, telegram_id: str) -> bool:
        """
        채널 구독 여부

        Raises:
            UpstreamUnavailableError: 토큰 미설정, 네트워크 오류, API 오류 응답
        """
        if not self.bot_token:
            raise UpstreamUnavailableError("telegram", "MAIN_BOT_TOKEN이 설정되지 않았습니다")

        status = await asyncio.to_thread(self._fetch_member_status, str(telegram_id))
        subscribed = status in SUBSCRIBED_STATUSES
        logger.debug(f"Subscription check {telegram_id} in {self.channel}: {status}")
        return subscribed

    def _fetch_member_status(self, telegram_id: str) -> str:
        url = f"{TELEGRAM_API_BASE}/bot{self.bot_token}/getChatMember"
        try:
            response = self.session.get(
                url,
                params={"chat_id": self.channel, "user_id": telegram_id},
                timeout=self.timeout
            )
            payload = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.warning(f"getChatMember request failed: {e}")
            raise UpstreamUnavailableError("telegram", str(e)) from e

        if not payload.get("ok"):
            description = payload.get("description", f"HTTP {response.status_code}")
            logger.warning(f"getChatMember returned error: {description}")
            raise UpstreamUnavailableError("telegram", description)

        return payload.get("result", {}).get("status", "")
