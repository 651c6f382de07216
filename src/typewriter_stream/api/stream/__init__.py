"""
목적: 스트림 API 패키지를 정의한다.
설명: 스트림 요청 모델, 라우터, 서비스 조립을 담는다.
디자인 패턴: 패키지 구성
참조: src/typewriter_stream/api/stream/routers/router.py
"""
