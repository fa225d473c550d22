"""
Domain Constants: 커피 추천 전역 상수.

기본값, 사용자 메시지, 모델 설정 등 서버/클라이언트가 공유하는 값들.
"""

# =============================================================================
# Suggestion Defaults (정규화 fallback 값)
# =============================================================================
# 업스트림 응답에서 필드가 없거나 타입이 틀리면 아래 값으로 대체.
# name은 고정값이 없음 → 호출자의 입력(서버) 또는 CLIENT_FALLBACK_NAME(클라이언트)

DEFAULT_GREETING = "Good morning!"
DEFAULT_SUGGESTED_COFFEE = "Classic coffee"
DEFAULT_REASONING = "A great choice for any morning"
DEFAULT_HEALTH_FACT = "Coffee is generally good for you in moderation"
DEFAULT_CONFIDENCE_SCORE = 0.8

CLIENT_FALLBACK_NAME = "Unknown"

# =============================================================================
# Confidence Tiers (표시용)
# =============================================================================

CONFIDENCE_HIGH_THRESHOLD = 0.8
CONFIDENCE_MEDIUM_THRESHOLD = 0.6

# =============================================================================
# Bedrock Defaults (config 미설정 시)
# =============================================================================

DEFAULT_AWS_REGION = "ap-southeast-2"
DEFAULT_MODEL_ID = "anthropic.claude-3-haiku-20240307-v1:0"
DEFAULT_MAX_TOKENS = 1000

TOOL_NAME = "morning_coffee_greeting"

# =============================================================================
# User-facing Messages
# =============================================================================

MSG_NAME_REQUIRED = "Name is required"
MSG_ACCESS_DENIED = (
    "Access denied to AWS Bedrock. Please check your credentials and model access."
)
MSG_INVALID_REQUEST = (
    "Invalid request to AWS Bedrock. Please check the model ID and parameters."
)
MSG_THROTTLED = "AWS Bedrock is currently throttling requests. Please try again later."
MSG_GENERATION_FAILED = "Failed to generate coffee suggestion"
MSG_UNKNOWN_ERROR = "Unknown error occurred"
MSG_NO_CANDIDATE = (
    "No tool call result in response. "
    "Response structure may be different than expected."
)
MSG_INVALID_STRUCTURE = "Invalid data structure received from API"
MSG_UNEXPECTED_ERROR = "An unexpected error occurred"
