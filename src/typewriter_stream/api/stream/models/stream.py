"""
목적: 스트림 API 요청/응답 모델을 정의한다.
설명: 프롬프트 스트림 요청, 시뮬레이트 요청/응답, 루트 서비스 정보 모델을 제공한다.
디자인 패턴: 데이터 전송 객체(DTO)
참조: src/typewriter_stream/api/stream/routers/stream_prompt.py
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class StreamPromptRequest(BaseModel):
    """프롬프트 스트림 요청 모델.

    빈 값/누락 판단은 서비스에서 도메인 예외로 처리해 구조화된 400 응답을 만든다.
    """

    prompt: str | None = Field(default=None, description="사용자 프롬프트(공백 제외 1자 이상)")


class SimulateRequest(BaseModel):
    """비스트림 시뮬레이트 요청 모델."""

    data: Any = Field(default=None, description="처리할 임의 데이터")


class SimulateResponse(BaseModel):
    """비스트림 시뮬레이트 응답 모델."""

    message: str


class ServiceInfoResponse(BaseModel):
    """루트 경로 서비스 정보 모델."""

    name: str
    version: str
    status: str = "running"
    endpoints: dict[str, str] = Field(default_factory=dict)
