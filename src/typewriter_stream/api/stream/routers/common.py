"""
목적: 스트림 라우터 공통 유틸을 제공한다.
설명: 도메인 예외를 HTTP 예외로 변환하는 헬퍼를 제공한다.
디자인 패턴: 유틸리티 모듈
참조: src/typewriter_stream/api/stream/routers/router.py
"""

from __future__ import annotations

from fastapi import HTTPException, status

from typewriter_stream.shared.exceptions import BaseAppException, ErrorCode

_CLIENT_ERROR_CODES = {ErrorCode.PROMPT_EMPTY.value}


def to_http_exception(error: BaseAppException) -> HTTPException:
    """도메인 예외를 HTTP 예외로 변환한다."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    if error.code in _CLIENT_ERROR_CODES:
        status_code = status.HTTP_400_BAD_REQUEST
    return HTTPException(status_code=status_code, detail=error.to_dict())
