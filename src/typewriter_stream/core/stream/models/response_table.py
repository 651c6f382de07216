"""
목적: 키워드 응답 테이블 모델을 정의한다.
설명: 순서가 있는 (키워드, 응답) 항목과 매칭 대상이 아닌 기본 응답을 불변 모델로 보관한다.
디자인 패턴: 값 객체
참조: src/typewriter_stream/core/stream/selector/response_selector.py
"""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from typewriter_stream.core.stream.const import DEFAULT_RESPONSE_KEY


class ResponseEntry(BaseModel):
    """키워드 1개와 그 응답 본문."""

    model_config = ConfigDict(frozen=True)

    keyword: str = Field(..., min_length=1)
    text: str = Field(..., min_length=1)

    @field_validator("keyword")
    @classmethod
    def _normalize_keyword(cls, value: str) -> str:
        normalized = value.strip().lower()
        if not normalized:
            raise ValueError("keyword는 비어 있을 수 없습니다.")
        if normalized == DEFAULT_RESPONSE_KEY:
            raise ValueError(f"'{DEFAULT_RESPONSE_KEY}'는 매칭 키워드로 쓸 수 없습니다.")
        return normalized


class ResponseTable(BaseModel):
    """순서 있는 키워드 응답 테이블.

    Args:
        entries: 매칭 순서대로 나열된 항목. 먼저 나온 항목이 우선한다.
        default_text: 어떤 키워드도 맞지 않을 때 쓰는 응답.
    """

    model_config = ConfigDict(frozen=True)

    entries: tuple[ResponseEntry, ...] = ()
    default_text: str = Field(..., min_length=1)

    @model_validator(mode="after")
    def _reject_duplicate_keywords(self) -> "ResponseTable":
        seen: set[str] = set()
        for entry in self.entries:
            if entry.keyword in seen:
                raise ValueError(f"중복된 keyword입니다: {entry.keyword}")
            seen.add(entry.keyword)
        return self

    @classmethod
    def from_mapping(
        cls,
        mapping: Mapping[str, str],
        fallback_default: str | None = None,
    ) -> "ResponseTable":
        """순서 있는 매핑에서 테이블을 만든다. `default` 키는 기본 응답이 된다."""

        default_text = fallback_default
        entries: list[ResponseEntry] = []
        for key, text in mapping.items():
            if str(key).strip().lower() == DEFAULT_RESPONSE_KEY:
                default_text = text
                continue
            entries.append(ResponseEntry(keyword=key, text=text))
        if default_text is None:
            raise ValueError(f"응답 테이블에는 '{DEFAULT_RESPONSE_KEY}' 항목이 필요합니다.")
        return cls(entries=tuple(entries), default_text=default_text)

    @property
    def keywords(self) -> tuple[str, ...]:
        return tuple(entry.keyword for entry in self.entries)

    def match(self, lowered_prompt: str) -> ResponseEntry | None:
        """소문자 프롬프트에 부분 문자열로 포함된 첫 항목을 반환한다."""

        for entry in self.entries:
            if entry.keyword in lowered_prompt:
                return entry
        return None
