"""
목적: 프롬프트 스트림 라우터를 제공한다.
설명: 프롬프트를 받아 준비된 응답을 문자 단위 SSE로 반환한다.
디자인 패턴: 라우터 패턴
참조: src/typewriter_stream/api/stream/services/stream_service.py
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse

from typewriter_stream.api.const import STREAM_API_PATH
from typewriter_stream.api.stream.models import StreamPromptRequest
from typewriter_stream.api.stream.routers.common import to_http_exception
from typewriter_stream.api.stream.services import PromptStreamService, get_prompt_stream_service
from typewriter_stream.shared.exceptions import BaseAppException

router = APIRouter()


@router.post(
    STREAM_API_PATH,
    summary="프롬프트 응답을 문자 단위 SSE로 스트리밍합니다.",
)
async def stream_prompt(
    request: StreamPromptRequest,
    service: PromptStreamService = Depends(get_prompt_stream_service),
) -> StreamingResponse:
    """chunk 이벤트를 문자마다 보내고 마지막에 done 이벤트를 보낸다."""

    # 케이던스 트리거가 현재 이벤트 루프에 무장되어야 하므로 async 핸들러로 둔다.
    try:
        return service.open_stream(request)
    except BaseAppException as error:
        raise to_http_exception(error) from error
