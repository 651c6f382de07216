"""
목적: 런타임 환경별 `.env` 로딩을 검증한다.
설명: ENV 별칭 해석, 환경별 리소스 파일 로딩, 잘못된 값/누락 파일 오류를 확인한다.
디자인 패턴: 전략 패턴 단위 테스트
참조: src/typewriter_stream/shared/config/runtime_env_loader.py
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from typewriter_stream.shared.config import RuntimeEnvironmentLoader

_MARKER_KEY = "TYPEWRITER_STREAM_TEST_MARKER"


@pytest.fixture
def isolated_env(monkeypatch) -> None:
    """테스트가 건드리는 환경 변수를 종료 시 원래대로 되돌린다."""

    for key in ("ENV", "APP_ENV", _MARKER_KEY):
        # 없던 키도 복원 대상으로 기록되도록 먼저 설정한 뒤 지운다.
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)


def _make_loader(tmp_path: Path) -> RuntimeEnvironmentLoader:
    return RuntimeEnvironmentLoader(
        project_root=tmp_path / "project",
        resources_root=tmp_path / "resources",
    )


def test_defaults_to_local_without_env(tmp_path, isolated_env) -> None:
    """ENV가 비어 있으면 local로 판별하고 리소스 파일을 요구하지 않는지 확인한다."""

    loader = _make_loader(tmp_path)

    assert loader.load() == "local"
    assert os.environ["ENV"] == "local"


def test_alias_loads_resource_env_file(tmp_path, monkeypatch, isolated_env) -> None:
    """production 별칭이 prod로 해석되고 해당 `.env`가 로드되는지 확인한다."""

    resource_dir = tmp_path / "resources" / "prod"
    resource_dir.mkdir(parents=True)
    (resource_dir / ".env").write_text(f"{_MARKER_KEY}=prod-value\n", encoding="utf-8")
    monkeypatch.setenv("APP_ENV", "Production")

    assert _make_loader(tmp_path).load() == "prod"
    assert os.environ[_MARKER_KEY] == "prod-value"
    assert os.environ["ENV"] == "prod"


def test_root_env_file_is_loaded_first(tmp_path, isolated_env) -> None:
    """프로젝트 루트 `.env`의 ENV 값이 환경 판별에 쓰이는지 확인한다."""

    project_root = tmp_path / "project"
    project_root.mkdir()
    (project_root / ".env").write_text("ENV=staging\n", encoding="utf-8")
    resource_dir = tmp_path / "resources" / "stg"
    resource_dir.mkdir(parents=True)
    (resource_dir / ".env").write_text(f"{_MARKER_KEY}=stg-value\n", encoding="utf-8")

    assert _make_loader(tmp_path).load() == "stg"
    assert os.environ[_MARKER_KEY] == "stg-value"


def test_unsupported_env_raises(monkeypatch, tmp_path, isolated_env) -> None:
    """지원하지 않는 ENV 값은 ValueError로 거절하는지 확인한다."""

    monkeypatch.setenv("ENV", "qa")

    with pytest.raises(ValueError):
        _make_loader(tmp_path).resolve()


def test_missing_resource_file_raises(monkeypatch, tmp_path, isolated_env) -> None:
    """dev 환경인데 리소스 파일이 없으면 FileNotFoundError를 던지는지 확인한다."""

    monkeypatch.setenv("ENV", "dev")

    with pytest.raises(FileNotFoundError):
        _make_loader(tmp_path).load()
