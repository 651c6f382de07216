"""
목적: API 상수 공개 API를 제공한다.
설명: 스트림/헬스/UI 라우팅 상수를 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/typewriter_stream/api/const/stream.py
"""

from typewriter_stream.api.const.stream import (
    HEALTH_PATH,
    ROOT_PATH,
    SIMULATE_PATH,
    STREAM_API_PATH,
    STREAM_API_PREFIX,
    STREAM_API_TAG,
    UI_MOUNT_PATH,
)

__all__ = [
    "HEALTH_PATH",
    "ROOT_PATH",
    "SIMULATE_PATH",
    "STREAM_API_PATH",
    "STREAM_API_PREFIX",
    "STREAM_API_TAG",
    "UI_MOUNT_PATH",
]
