"""
목적: 스트림 API 라우터 공개 API를 제공한다.
설명: 스트림/시뮬레이트 엔드포인트를 묶은 라우터를 노출한다.
디자인 패턴: 퍼사드
참조: src/typewriter_stream/api/stream/routers/router.py
"""

from typewriter_stream.api.stream.routers.router import router

__all__ = ["router"]
