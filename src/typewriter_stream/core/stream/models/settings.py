"""
목적: 스트림 서버의 불변 설정 모델을 정의한다.
설명: 시작 시 한 번 만들어 핸들러/선택기에 명시적으로 넘기는 설정 객체이다.
    JSON 파일(STREAM_CONFIG_PATH)과 STREAM__* 환경 변수, 호출자 overrides를 순서대로 병합한다.
디자인 패턴: 값 객체 + 빌더
참조: src/typewriter_stream/shared/config/loader.py, src/typewriter_stream/core/stream/const/settings.py
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from typewriter_stream.core.stream.const import (
    DEFAULT_ALLOWED_ORIGINS,
    DEFAULT_APP_NAME,
    DEFAULT_CADENCE_MS,
    DEFAULT_RESPONSE_KEY,
    DEFAULT_RESPONSES,
    SETTINGS_ENV_PREFIX,
    SETTINGS_FILE_ENV,
)
from typewriter_stream.core.stream.models.response_table import ResponseTable
from typewriter_stream.shared.config import ConfigLoader
from typewriter_stream.shared.exceptions import BaseAppException, ErrorCode
from typewriter_stream.shared.logging import Logger


def _default_table() -> ResponseTable:
    return ResponseTable.from_mapping(DEFAULT_RESPONSES)


class StreamSettings(BaseModel):
    """스트림 서버 설정 모델이다.

    Args:
        app_name: 루트 엔드포인트에 노출되는 서비스 이름.
        cadence_ms: 문자 1개당 송출 간격(ms).
        allowed_origins: CORS 허용 origin 목록.
        responses: 키워드 응답 테이블.
        max_buffered_events: 전송 계층 미전송 프레임 한도. 0이면 무제한.
        idle_timeout_seconds: 스트림 프레임 대기 한도(초). None이면 무제한.
    """

    model_config = ConfigDict(frozen=True)

    app_name: str = DEFAULT_APP_NAME
    cadence_ms: float = Field(default=DEFAULT_CADENCE_MS, gt=0)
    allowed_origins: tuple[str, ...] = DEFAULT_ALLOWED_ORIGINS
    responses: ResponseTable = Field(default_factory=_default_table)
    max_buffered_events: int = Field(default=0, ge=0)
    idle_timeout_seconds: float | None = Field(default=None, gt=0)

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def _split_origins(cls, value: Any) -> Any:
        if isinstance(value, str):
            return tuple(part.strip() for part in value.split(",") if part.strip())
        return value

    @field_validator("responses", mode="before")
    @classmethod
    def _coerce_responses(cls, value: Any) -> Any:
        # {"hello": "...", "default": "..."} 형태의 평면 매핑도 허용한다.
        if isinstance(value, Mapping) and "default_text" not in value and "entries" not in value:
            return ResponseTable.from_mapping(
                value,
                fallback_default=DEFAULT_RESPONSES[DEFAULT_RESPONSE_KEY],
            )
        return value

    @property
    def cadence_seconds(self) -> float:
        return self.cadence_ms / 1000.0

    @classmethod
    def load(
        cls,
        config_path: str | Path | None = None,
        overrides: Mapping[str, Any] | None = None,
        environ: Mapping[str, str] | None = None,
        logger: Logger | None = None,
    ) -> "StreamSettings":
        """설정 소스를 병합해 불변 설정을 만든다.

        우선순위: 모델 기본값 < JSON 파일 < STREAM__* 환경 변수 < overrides
        """

        source = os.environ if environ is None else environ
        path = config_path if config_path is not None else source.get(SETTINGS_FILE_ENV)
        data = (
            ConfigLoader(logger=logger)
            .add_json_file(path)
            .add_env(prefix=SETTINGS_ENV_PREFIX, environ=source)
            .build(overrides=overrides)
        )
        try:
            return cls.model_validate(data)
        except ValidationError as error:
            raise BaseAppException.from_code(
                "스트림 설정이 올바르지 않습니다.",
                ErrorCode.CONFIG_INVALID,
                cause=str(error),
                hint=f"{SETTINGS_FILE_ENV} 파일과 {SETTINGS_ENV_PREFIX}* 환경 변수를 확인하세요.",
                original=error,
            ) from error
