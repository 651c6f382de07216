"""
목적: 스트림 API 모델 공개 API를 제공한다.
설명: 요청/응답 DTO를 노출한다.
디자인 패턴: 퍼사드
참조: src/typewriter_stream/api/stream/models/stream.py
"""

from typewriter_stream.api.stream.models.stream import (
    ServiceInfoResponse,
    SimulateRequest,
    SimulateResponse,
    StreamPromptRequest,
)

__all__ = [
    "ServiceInfoResponse",
    "SimulateRequest",
    "SimulateResponse",
    "StreamPromptRequest",
]
