"""
목적: 런타임 환경별 `.env` 로딩을 제공한다.
설명: 기본 `.env`를 로드한 뒤 `ENV` 값을 기준으로 local/dev/stg/prod 환경 파일을 선택해 로드한다.
디자인 패턴: 전략 패턴
참조: src/typewriter_stream/shared/config/loader.py, src/typewriter_stream/api/main.py
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Sequence

from dotenv import load_dotenv

from typewriter_stream.shared.logging import Logger, create_default_logger


class RuntimeEnvironmentLoader:
    """런타임 환경별 `.env` 로더이다.

    동작 순서:
    1. 프로젝트 루트의 `.env`를 우선 로드한다.
    2. `ENV`(또는 후보 키) 값을 읽어 런타임 환경을 결정한다. 비어 있으면 `local`이다.
    3. `dev/stg/prod`인 경우 `src/typewriter_stream/resources/<env>/.env`를 추가로 로드한다.
    """

    _SUPPORTED_ENVS = frozenset({"local", "dev", "stg", "prod"})
    _ENV_ALIASES = {
        "development": "dev",
        "staging": "stg",
        "production": "prod",
    }
    _DEFAULT_ENV_KEYS = ("ENV", "APP_ENV")
    _ENV_FILENAME = ".env"

    def __init__(
        self,
        logger: Optional[Logger] = None,
        project_root: Optional[Path] = None,
        resources_root: Optional[Path] = None,
        env_keys: Optional[Sequence[str]] = None,
    ) -> None:
        package_dir = Path(__file__).resolve().parents[2]
        self._project_root = Path(project_root or package_dir.parents[1])
        self._resources_root = Path(resources_root or package_dir / "resources")
        self._env_keys = tuple(env_keys or self._DEFAULT_ENV_KEYS)
        self._logger = logger or create_default_logger("RuntimeEnvironmentLoader")

    @property
    def project_root(self) -> Path:
        return self._project_root

    @property
    def resources_root(self) -> Path:
        return self._resources_root

    def load(self, override_root_env: bool = False) -> str:
        """런타임 환경을 판별하고 관련 `.env`를 로드한다.

        Args:
            override_root_env: 루트 `.env`가 기존 환경 변수를 덮어쓸지 여부.

        Returns:
            판별된 런타임 환경 문자열(`local/dev/stg/prod`).
        """

        root_env = self._project_root / self._ENV_FILENAME
        if root_env.exists():
            load_dotenv(dotenv_path=root_env, override=override_root_env)
        else:
            self._logger.debug(f"프로젝트 루트 .env 파일이 없어 건너뜁니다: {root_env}")

        runtime_env = self.resolve()
        os.environ["ENV"] = runtime_env
        if runtime_env == "local":
            self._logger.info(f"runtime.env.loaded: env={runtime_env}")
            return runtime_env

        resource_env = self._resources_root / runtime_env / self._ENV_FILENAME
        if not resource_env.exists():
            raise FileNotFoundError(f"환경 파일을 찾을 수 없습니다: {resource_env}")
        load_dotenv(dotenv_path=resource_env, override=False)
        self._logger.info(f"runtime.env.loaded: env={runtime_env}, resource={resource_env}")
        return runtime_env

    def resolve(self) -> str:
        """현재 환경 변수 기준 런타임 환경을 판별한다."""

        raw_value = next(
            (os.environ[key] for key in self._env_keys if os.environ.get(key, "").strip()),
            "",
        )
        normalized = raw_value.strip().lower()
        if not normalized:
            return "local"
        normalized = self._ENV_ALIASES.get(normalized, normalized)
        if normalized not in self._SUPPORTED_ENVS:
            supported = ", ".join(sorted(self._SUPPORTED_ENVS))
            raise ValueError(f"지원하지 않는 ENV 값입니다: {raw_value}. 허용값: {supported}")
        return normalized
