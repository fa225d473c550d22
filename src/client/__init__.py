"""Client layer: 커피 추천 API 제출 + 표시 상태."""

from .submitter import (
    CoffeeSubmitter,
    Failed,
    Idle,
    Pending,
    SubmissionState,
    Succeeded,
    interpret_response,
)

__all__ = [
    "CoffeeSubmitter",
    "SubmissionState",
    "Idle",
    "Pending",
    "Succeeded",
    "Failed",
    "interpret_response",
]
