"""
데이터베이스 / 외부 연동 환경 설정

.env 파일(python-dotenv)에서 읽어옵니다.
"""
import os

from dotenv import load_dotenv

load_dotenv()

TORTOISE_MODULES = {"models": ["models"]}
"""Tortoise 모델 모듈 등록 정보"""


def build_db_url() -> str:
    """
    Tortoise 접속 URL 구성

    DATABASE_URL이 있으면 그대로 사용하고, 없으면 개별 항목으로 조합합니다.

    Raises:
        RuntimeError: 필요한 설정이 누락됨
    """
    full_url = os.getenv("DATABASE_URL")
    if full_url:
        return full_url

    engine = os.getenv("DATABASE_ENGINE", "mysql")
    host = os.getenv("DATABASE_HOST")
    port = int(os.getenv("DATABASE_PORT") or 0)
    user = os.getenv("DATABASE_USER")
    password = os.getenv("DATABASE_PASSWORD")
    name = os.getenv("DATABASE_NAME")

    if not host or not port or not user or not password or not name:
        raise RuntimeError("데이터 베이스 설정에 필요한 정보가 부족합니다 .env를 확인해주세요")

    return f"{engine}://{user}:{password}@{host}:{port}/{name}"


def get_bot_token() -> str | None:
    """채널 구독 확인에 사용하는 봇 토큰"""
    return os.getenv("MAIN_BOT_TOKEN")


def get_channel_username() -> str:
    """구독 확인 대상 채널"""
    return os.getenv("CHANNEL_USERNAME", "@VLTOKEN")
