"""
목적: API 미들웨어 공개 API를 제공한다.
설명: 요청 로깅 미들웨어를 노출한다.
디자인 패턴: 퍼사드
참조: src/typewriter_stream/api/middleware/request_logging.py
"""

from typewriter_stream.api.middleware.request_logging import RequestLoggingMiddleware

__all__ = ["RequestLoggingMiddleware"]
