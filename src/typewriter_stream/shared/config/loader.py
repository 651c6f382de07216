"""
목적: 애플리케이션 설정 로더를 제공한다.
설명: JSON 파일, 접두사 환경 변수, 호출자 overrides를 순서대로 병합해 설정 사전을 만든다.
디자인 패턴: 빌더 패턴
참조: src/typewriter_stream/shared/const/__init__.py, src/typewriter_stream/core/stream/models/settings.py
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from typewriter_stream.shared.const import SharedConst
from typewriter_stream.shared.logging import Logger, create_default_logger


class ConfigLoader:
    """설정 로더 구현체이다.

    나중에 추가된 소스가 앞선 소스를 덮어쓰며, 중첩 dict는 키 단위로 병합된다.

    Args:
        logger: 주입 가능한 로거.
    """

    _DEFAULT_ENCODING = SharedConst.DEFAULT_ENCODING
    _DEFAULT_ENV_DELIMITER = SharedConst.ENV_NESTED_DELIMITER

    def __init__(self, logger: Optional[Logger] = None) -> None:
        self._logger = logger or create_default_logger("ConfigLoader")
        self._sources: list[tuple[str, Dict[str, Any]]] = []

    @property
    def source_names(self) -> list[str]:
        """추가된 소스 이름을 순서대로 반환한다."""

        return [name for name, _ in self._sources]

    def add_json_file(
        self,
        path: str | Path | None,
        required: bool = False,
        encoding: Optional[str] = None,
    ) -> "ConfigLoader":
        """JSON 파일 설정을 추가한다. 경로가 비어 있으면 건너뛴다."""

        if path is None or not str(path).strip():
            if required:
                raise ValueError("path는 비어 있을 수 없습니다.")
            return self
        file_path = Path(path)
        if not file_path.exists():
            if required:
                raise FileNotFoundError(str(file_path))
            self._logger.warning(f"설정 파일이 없어 건너뜁니다: {file_path}")
            return self
        raw = file_path.read_text(encoding=encoding or self._DEFAULT_ENCODING)
        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise ValueError(f"JSON 설정 파일 파싱에 실패했습니다: {file_path}") from exc
        if not isinstance(payload, dict):
            raise ValueError("JSON 설정 파일은 최상위가 객체여야 합니다.")
        self._sources.append((f"json:{file_path}", payload))
        return self

    def add_env(
        self,
        prefix: str,
        delimiter: Optional[str] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "ConfigLoader":
        """접두사가 붙은 환경 변수를 설정으로 추가한다.

        예: prefix="STREAM__" 일 때 STREAM__CADENCE_MS=10 -> {"cadence_ms": 10}
        """

        if not prefix:
            raise ValueError("prefix는 비어 있을 수 없습니다.")
        delimiter = delimiter or self._DEFAULT_ENV_DELIMITER
        source = os.environ if environ is None else environ
        env_data: Dict[str, Any] = {}
        for key, value in source.items():
            if not key.startswith(prefix):
                continue
            parts = [part.lower() for part in key[len(prefix) :].split(delimiter) if part]
            if not parts:
                continue
            self._assign_nested(env_data, parts, self._parse_value(value))
        if env_data:
            self._sources.append((f"env:{prefix}", env_data))
        return self

    def build(self, overrides: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """수집된 설정을 병합해 반환한다."""

        merged: Dict[str, Any] = {}
        for _, source in self._sources:
            merged = self._merge(merged, source)
        if overrides:
            merged = self._merge(merged, dict(overrides))
        self._logger.debug(f"config.build: sources={self.source_names}")
        return merged

    def _assign_nested(self, root: Dict[str, Any], keys: list[str], value: Any) -> None:
        current = root
        for part in keys[:-1]:
            if not isinstance(current.get(part), dict):
                current[part] = {}
            current = current[part]
        current[keys[-1]] = value

    def _merge(self, base: Dict[str, Any], incoming: Mapping[str, Any]) -> Dict[str, Any]:
        merged = dict(base)
        for key, value in incoming.items():
            if isinstance(merged.get(key), dict) and isinstance(value, dict):
                merged[key] = self._merge(merged[key], value)
            else:
                merged[key] = value
        return merged

    def _parse_value(self, raw: str) -> Any:
        text = raw.strip()
        lowered = text.lower()
        if lowered in {"true", "false"}:
            return lowered == "true"
        if lowered in {"null", "none"}:
            return None
        if text[:1] in {"{", "["} or text.lstrip("-").replace(".", "", 1).isdigit():
            try:
                return json.loads(text)
            except json.JSONDecodeError:
                return raw
        return raw
