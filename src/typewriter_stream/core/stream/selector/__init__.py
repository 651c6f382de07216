"""
목적: 응답 선택기 공개 API를 제공한다.
설명: 프롬프트를 렌더링된 응답 문자열로 바꾸는 선택기를 노출한다.
디자인 패턴: 퍼사드
참조: src/typewriter_stream/core/stream/selector/response_selector.py
"""

from typewriter_stream.core.stream.selector.response_selector import ResponseSelector

__all__ = ["ResponseSelector"]
