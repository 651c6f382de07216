"""
목적: 헬스체크 라우터 제공
설명: 서비스 상태와 진행 중인 스트림 수를 확인하는 엔드포인트를 정의한다
디자인 패턴: 라우터 패턴
참조: src/typewriter_stream/api/main.py
"""
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from typewriter_stream.api.const import HEALTH_PATH
from typewriter_stream.api.stream.services import StreamRuntime, get_stream_runtime

router = APIRouter()


@router.get(HEALTH_PATH, summary="서버의 상태를 조회합니다.")
def health_check(runtime: StreamRuntime = Depends(get_stream_runtime)):
    """서버의 상태를 확인합니다."""
    return JSONResponse(
        content={"status": "ok", "active_streams": runtime.registry.active_count},
        status_code=status.HTTP_200_OK,
    )
