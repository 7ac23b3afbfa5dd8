"""
core/config.py - 중앙 설정 관리

환경 변수에서 실행 설정을 읽어 ``Settings`` 데이터 클래스로 제공합니다.

환경 변수:
    LOOKR_REGIONS: 인가된 리전 코드 목록 (쉼표 구분)
    LOOKR_MAX_WORKERS: 리전 병렬 워커 수 (기본: 1 = 순차 실행)
    LOOKR_DETAIL_WORKERS: 리전 내 상세 조회 워커 수 (기본: 1)

Usage:
    from core.config import load_settings

    settings = load_settings()
    settings.regions        # ("us-east-1", "us-east-2", ...)
    settings.max_workers    # 1
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from core.exceptions import ConfigurationError

__version__ = "1.0.0"

# 별도 설정이 없을 때 인가된 리전 목록
DEFAULT_AUTHORIZED_REGIONS: tuple[str, ...] = (
    "us-east-1",
    "us-east-2",
    "us-west-1",
    "us-west-2",
    "sa-east-1",
)

ENV_REGIONS = "LOOKR_REGIONS"
ENV_MAX_WORKERS = "LOOKR_MAX_WORKERS"
ENV_DETAIL_WORKERS = "LOOKR_DETAIL_WORKERS"

MAX_WORKERS_LIMIT = 32


def get_version() -> str:
    """패키지 버전 문자열 반환"""
    return __version__


@dataclass(frozen=True)
class Settings:
    """실행 설정

    Attributes:
        regions: 인가된 리전 코드 (순서 유지)
        max_workers: 리전 병렬 워커 수 (1이면 순차)
        detail_workers: 리전 내 상세 조회 워커 수 (1이면 순차)
        profile: boto3 named profile (None이면 기본 자격 증명 체인)
    """

    regions: tuple[str, ...] = DEFAULT_AUTHORIZED_REGIONS
    max_workers: int = 1
    detail_workers: int = 1
    profile: str | None = None


def parse_region_list(raw: str) -> tuple[str, ...]:
    """쉼표 구분 리전 문자열을 중복 없는 튜플로 변환 (첫 등장 순서 유지)"""
    seen: dict[str, None] = {}
    for part in raw.split(","):
        code = part.strip()
        if code:
            seen.setdefault(code, None)
    return tuple(seen)


def _parse_workers(env: Mapping[str, str], key: str) -> int:
    raw = env.get(key, "").strip()
    if not raw:
        return 1
    try:
        value = int(raw)
    except ValueError as e:
        raise ConfigurationError(key, f"정수가 아닙니다: {raw!r}", cause=e) from e
    if value < 1:
        raise ConfigurationError(key, f"1 이상이어야 합니다: {value}")
    return min(value, MAX_WORKERS_LIMIT)


def load_settings(env: Mapping[str, str] | None = None) -> Settings:
    """환경 변수에서 Settings 생성

    Args:
        env: 환경 변수 매핑 (None이면 os.environ)

    Returns:
        Settings 인스턴스

    Raises:
        ConfigurationError: 워커 수가 정수가 아니거나 1 미만인 경우
    """
    env = os.environ if env is None else env

    regions = DEFAULT_AUTHORIZED_REGIONS
    if ENV_REGIONS in env:
        # 빈 값도 명시적 설정으로 취급 (RegionSource에서 ConfigurationError)
        regions = parse_region_list(env[ENV_REGIONS])

    return Settings(
        regions=regions,
        max_workers=_parse_workers(env, ENV_MAX_WORKERS),
        detail_workers=_parse_workers(env, ENV_DETAIL_WORKERS),
        profile=env.get("AWS_PROFILE") or None,
    )
