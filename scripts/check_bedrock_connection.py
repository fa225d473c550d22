#!/usr/bin/env python
"""
Bedrock 연결 확인 스크립트.

실행:
    uv run python scripts/check_bedrock_connection.py
    uv run python scripts/check_bedrock_connection.py --name Sam
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

# 프로젝트 루트를 path에 추가
sys.path.insert(0, str(Path(__file__).parent.parent))

# .env 파일 로드 (AWS_REGION, AWS_ACCESS_KEY_ID 등)
from dotenv import load_dotenv  # noqa: E402

load_dotenv()

from src.app.main import load_config  # noqa: E402
from src.app.providers.bedrock import BedrockProvider  # noqa: E402
from src.app.services.suggest import CoffeeSuggestionService  # noqa: E402
from src.domain.errors import CoffeeError  # noqa: E402


async def check_bedrock(name: str) -> bool:
    """Bedrock 호출 1회 + 정규화 결과 출력."""
    print("\n" + "=" * 60)
    print("🧪 AWS Bedrock 연결 테스트")
    print("=" * 60)

    provider = BedrockProvider.from_config(load_config())
    print(f"✅ 모델: {provider.model_id}")
    print(f"✅ 리전: {provider.region}")

    service = CoffeeSuggestionService(provider)

    try:
        print("📤 테스트 요청 전송 중...")
        suggestion = await service.suggest(name)
    except CoffeeError as e:
        print(f"❌ [{e.code}] {e.message}")
        if e.details:
            print(f"   Details: {e.details}")
        return False

    print("📥 응답:")
    for key, value in suggestion.to_dict().items():
        print(f"   {key}: {value}")
    print("✅ Bedrock 연결 성공!")
    return True


def main() -> int:
    parser = argparse.ArgumentParser(description="Bedrock 연결 확인")
    parser.add_argument("--name", type=str, default="Tester", help="테스트용 이름")
    parser.add_argument("--verbose", action="store_true", help="raw 응답 로그 출력")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    ok = asyncio.run(check_bedrock(args.name))
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
