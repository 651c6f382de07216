"""
목적: 예외 모듈 공개 API를 제공한다.
설명: 외부에서 사용할 예외 모델, 에러 코드, 베이스 클래스를 노출한다.
디자인 패턴: 퍼사드
참조: src/typewriter_stream/shared/exceptions/models.py, src/typewriter_stream/shared/exceptions/base.py
"""

from typewriter_stream.shared.exceptions.base import BaseAppException
from typewriter_stream.shared.exceptions.models import ErrorCode, ExceptionDetail

__all__ = ["BaseAppException", "ErrorCode", "ExceptionDetail"]
