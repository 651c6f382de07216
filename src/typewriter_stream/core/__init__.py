"""
목적: 코어 도메인 패키지를 정의한다.
설명: 응답 선택과 스트림 세션 상태 머신을 담는 계층이다.
디자인 패턴: 패키지 구성
참조: src/typewriter_stream/core/stream/__init__.py
"""
