"""
목적: 공통 계층 패키지를 정의한다.
설명: 예외/로깅/설정/런타임(케이던스, 전송) 모듈을 묶는다.
디자인 패턴: 패키지 구성
참조: src/typewriter_stream/shared/runtime/__init__.py
"""
