"""
목적: 스트림 API 서비스 공개 API를 제공한다.
설명: 요청 핸들러 서비스와 런타임 조립/주입/종료 함수를 노출한다.
디자인 패턴: 퍼사드
참조: src/typewriter_stream/api/stream/services/runtime.py, src/typewriter_stream/api/stream/services/stream_service.py
"""

from typewriter_stream.api.stream.services.runtime import (
    StreamRuntime,
    build_stream_runtime,
    get_prompt_stream_service,
    get_stream_runtime,
    shutdown_stream_runtime,
)
from typewriter_stream.api.stream.services.stream_service import PromptStreamService

__all__ = [
    "PromptStreamService",
    "StreamRuntime",
    "build_stream_runtime",
    "get_prompt_stream_service",
    "get_stream_runtime",
    "shutdown_stream_runtime",
]
