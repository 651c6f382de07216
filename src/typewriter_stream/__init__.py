"""
목적: typewriter_stream 패키지 루트를 정의한다.
설명: 프롬프트를 받아 준비된 응답을 문자 단위 SSE로 흘려보내는 데모 서버 패키지이다.
디자인 패턴: 패키지 루트
참조: src/typewriter_stream/api/main.py
"""

__version__ = "0.1.0"
