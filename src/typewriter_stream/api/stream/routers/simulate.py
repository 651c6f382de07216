"""
목적: 비스트림 시뮬레이트 라우터를 제공한다.
설명: 받은 데이터를 가공 메시지로 감싸 JSON으로 즉시 반환한다.
디자인 패턴: 라우터 패턴
참조: src/typewriter_stream/api/stream/services/stream_service.py
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from typewriter_stream.api.const import SIMULATE_PATH, STREAM_API_TAG
from typewriter_stream.api.stream.models import SimulateRequest, SimulateResponse
from typewriter_stream.api.stream.services import PromptStreamService, get_prompt_stream_service

router = APIRouter(tags=[STREAM_API_TAG])


@router.post(
    SIMULATE_PATH,
    response_model=SimulateResponse,
    summary="AI 처리를 흉내 낸 단건 응답을 반환합니다.",
)
def simulate(
    request: SimulateRequest,
    service: PromptStreamService = Depends(get_prompt_stream_service),
) -> SimulateResponse:
    return service.simulate(request)
