#!/usr/bin/env python
"""
커피 추천 API에 이름을 제출하고 최종 상태를 출력.

실행:
    uv run python scripts/submit_name.py Sam
    uv run python scripts/submit_name.py Sam --base-url http://127.0.0.1:8000
"""

import argparse
import asyncio
import sys
from pathlib import Path

# 프로젝트 루트를 path에 추가
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.app.main import load_config  # noqa: E402
from src.client.submitter import (  # noqa: E402
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    CoffeeSubmitter,
    Failed,
    SubmissionState,
    Succeeded,
)


def format_state(state: SubmissionState) -> str:
    """최종 상태 → 출력 문자열."""
    if isinstance(state, Succeeded):
        result = state.result
        return "\n".join([
            f"🌅 {result.greeting}",
            f"☕ {result.suggested_coffee}",
            f"💭 {result.reasoning}",
            f"💚 {result.health_fact}",
            f"🎯 {result.confidence_percent} ({result.tier.value})",
        ])
    if isinstance(state, Failed):
        lines = [f"❌ Error: {state.message}"]
        if state.details:
            lines.append(f"   Details: {state.details}")
        return "\n".join(lines)
    return f"state: {type(state).__name__}"


async def run(name: str, base_url: str, timeout: float) -> int:
    submitter = CoffeeSubmitter(base_url=base_url, timeout=timeout)
    state = await submitter.submit(name)
    print(format_state(state))
    return 0 if isinstance(state, Succeeded) else 1


def main() -> int:
    # default.yaml의 client 섹션이 기본값
    client_config = load_config().get("client") or {}

    parser = argparse.ArgumentParser(
        description="커피 추천 API 클라이언트",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("name", type=str, help="추천받을 사람 이름")
    parser.add_argument(
        "--base-url",
        type=str,
        default=client_config.get("base_url", DEFAULT_BASE_URL),
        help="서버 주소",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=float(client_config.get("timeout", DEFAULT_TIMEOUT)),
        help="요청 timeout (초)",
    )
    args = parser.parse_args()

    return asyncio.run(run(args.name.strip(), args.base_url, args.timeout))


if __name__ == "__main__":
    exit(main())
