# core/__init__.py
"""
core - lookr 인벤토리 수집 인프라

아키텍처:
    core/
    ├── region/         # 인가된 리전 공급자 및 리전 이름 테이블
    ├── parallel/       # boto3 client 생성, 순서 보존 병렬 실행, 에러 수집
    ├── inventory/      # 프로바이더, 정규화, 실패 정책, 범용 수집기
    │   └── services/   # 리소스 종류별 바인딩 (14종)
    ├── output/         # TableSink (rich 테이블, CSV, JSON, xlsx)
    ├── config.py       # 환경 변수 기반 설정
    └── exceptions.py   # 통합 예외 계층

Usage:
    from core.config import load_settings
    from core.inventory import ResourceCollector, get_kind
    from core.region import region_source_from_settings

    settings = load_settings()
    collector = ResourceCollector(get_kind("ebs"), region_source_from_settings(settings))
    result = collector.collect()
"""

from core import config, exceptions, inventory, output, parallel, region

__all__: list[str] = [
    # 서브패키지
    "inventory",
    "output",
    "parallel",
    "region",
    # 모듈
    "config",
    "exceptions",
]
