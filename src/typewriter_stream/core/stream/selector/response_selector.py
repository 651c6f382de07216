"""
목적: 프롬프트에 맞는 준비된 응답을 고르고 봉투 형식으로 렌더링한다.
설명: 소문자 프롬프트를 테이블 순서대로 키워드와 비교해 첫 매칭 응답(없으면 기본 응답)을 고른 뒤,
    원문 프롬프트 에코와 생성 시각을 앞뒤에 붙인다. 시계만 읽고 그 밖의 부수 효과는 없다.
디자인 패턴: 순수 함수형 서비스
참조: src/typewriter_stream/core/stream/models/response_table.py
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone

from typewriter_stream.core.stream.const import ECHO_TEMPLATE, TIMESTAMP_FORMAT, TIMESTAMP_TEMPLATE
from typewriter_stream.core.stream.models import ResponseTable


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ResponseSelector:
    """키워드 테이블 기반 응답 선택기.

    Args:
        table: 불변 응답 테이블.
        clock: 생성 시각을 돌려주는 함수. 기본값은 UTC 현재 시각.
    """

    def __init__(self, table: ResponseTable, clock: Callable[[], datetime] | None = None) -> None:
        self._table = table
        self._clock = clock or _utc_now

    @property
    def table(self) -> ResponseTable:
        return self._table

    def select_text(self, prompt: str) -> str:
        """테이블 순서상 첫 매칭 응답 본문을 반환한다."""

        entry = self._table.match(prompt.lower())
        if entry is None:
            return self._table.default_text
        return entry.text

    def render(self, prompt: str) -> str:
        """에코 + 선택 본문 + 생성 시각으로 이루어진 최종 응답을 반환한다."""

        generated_at = self._clock()
        if generated_at.tzinfo is None:
            # naive 값은 UTC 기준 시각으로 간주한다.
            generated_at = generated_at.replace(tzinfo=timezone.utc)
        generated_at = generated_at.astimezone(timezone.utc)
        return (
            ECHO_TEMPLATE.format(prompt=prompt)
            + self.select_text(prompt)
            + TIMESTAMP_TEMPLATE.format(timestamp=generated_at.strftime(TIMESTAMP_FORMAT))
        )
