"""
목적: 스트림 API 라우터를 조립한다.
설명: 엔드포인트별 라우터를 하나의 APIRouter로 묶는다.
디자인 패턴: 라우터 패턴
참조: src/typewriter_stream/api/stream/routers/stream_prompt.py, src/typewriter_stream/api/stream/routers/simulate.py
"""

from fastapi import APIRouter

from typewriter_stream.api.const import STREAM_API_PREFIX, STREAM_API_TAG
from typewriter_stream.api.stream.routers.simulate import router as simulate_router
from typewriter_stream.api.stream.routers.stream_prompt import router as stream_prompt_router

router = APIRouter()

api_router = APIRouter(prefix=STREAM_API_PREFIX, tags=[STREAM_API_TAG])
api_router.include_router(stream_prompt_router)

router.include_router(api_router)
router.include_router(simulate_router)
