#!/usr/bin/env python3
"""
데이터베이스 스키마 생성 및 카탈로그 시드

실행: python scripts/init_database.py [--force-items]
"""
import argparse
import asyncio
import os
import sys

# 프로젝트 루트를 path에 추가
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)

from dotenv import load_dotenv
from tortoise import Tortoise

load_dotenv()

from config.database import TORTOISE_MODULES, build_db_url
from service.catalog_service import CatalogService


async def init_db():
    """데이터베이스 연결 초기화"""
    db_url = build_db_url()
    print(f"📡 데이터베이스 연결 중: {db_url.split('@')[-1]}")

    await Tortoise.init(
        db_url=db_url,
        modules=TORTOISE_MODULES
    )


async def main(force_items: bool):
    await init_db()
    try:
        print("\n📋 테이블 스키마 생성 중...")
        await Tortoise.generate_schemas()
        print("✅ 스키마 생성 완료!")

        print("\n🌱 카탈로그 시드 중...")
        result = await CatalogService.seed_catalog(force=force_items)
        print(f"✅ 태스크 {result.tasks_created}개, 아이템 {result.items_created}개 추가")
    finally:
        await Tortoise.close_connections()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="스키마 생성 및 초기 카탈로그 시드")
    parser.add_argument(
        "--force-items",
        action="store_true",
        help="아이템 테이블이 비어 있지 않아도 누락된 시드 아이템 추가"
    )
    args = parser.parse_args()

    asyncio.run(main(args.force_items))
