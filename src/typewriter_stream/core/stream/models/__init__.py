"""
목적: 스트림 코어 모델 공개 API를 제공한다.
설명: 응답 테이블과 불변 설정 모델을 노출한다.
디자인 패턴: 퍼사드
참조: src/typewriter_stream/core/stream/models/response_table.py, src/typewriter_stream/core/stream/models/settings.py
"""

from typewriter_stream.core.stream.models.response_table import ResponseEntry, ResponseTable
from typewriter_stream.core.stream.models.settings import StreamSettings

__all__ = ["ResponseEntry", "ResponseTable", "StreamSettings"]
