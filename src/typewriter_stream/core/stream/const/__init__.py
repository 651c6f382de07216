"""
목적: 스트림 코어 상수 공개 API를 제공한다.
설명: 기본 설정값과 기본 응답 테이블을 노출한다.
디자인 패턴: 퍼사드
참조: src/typewriter_stream/core/stream/const/settings.py
"""

from typewriter_stream.core.stream.const.settings import (
    DEFAULT_ALLOWED_ORIGINS,
    DEFAULT_APP_NAME,
    DEFAULT_CADENCE_MS,
    DEFAULT_RESPONSE_KEY,
    DEFAULT_RESPONSES,
    ECHO_TEMPLATE,
    SETTINGS_ENV_PREFIX,
    SETTINGS_FILE_ENV,
    TIMESTAMP_FORMAT,
    TIMESTAMP_TEMPLATE,
)

__all__ = [
    "DEFAULT_ALLOWED_ORIGINS",
    "DEFAULT_APP_NAME",
    "DEFAULT_CADENCE_MS",
    "DEFAULT_RESPONSE_KEY",
    "DEFAULT_RESPONSES",
    "ECHO_TEMPLATE",
    "SETTINGS_ENV_PREFIX",
    "SETTINGS_FILE_ENV",
    "TIMESTAMP_FORMAT",
    "TIMESTAMP_TEMPLATE",
]
