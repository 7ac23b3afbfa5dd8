"""
cli/headless.py - 리소스 종류별 수집 실행기

비대화형으로 한 리소스 종류를 수집하고 결과를 출력합니다.
테이블 본문은 stdout(또는 --output 파일)으로, 진단 메시지는 stderr로 출력합니다.

Usage:
    lookr rds                                   # 인가된 전체 리전
    lookr rds -r us-east-1 -r eu-west-1         # 리전 지정
    lookr route53 --policy best-effort          # 정책 변경
    lookr ec2 -w 4 --detail-workers 8           # 병렬 실행
    lookr sqs -f json -o queues.json            # JSON 파일 출력
    lookr rds -f xlsx -o rds.xlsx               # Excel 파일 출력

종료 코드:
    0: 성공 (skip이 있어도 성공)
    1: 수집 중단(abort), 설정 오류, 정규화 결함, 출력 파일 쓰기 실패
    130: 사용자 중단 (Ctrl+C)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from botocore.exceptions import BotoCoreError

from cli.ui.console import print_error, print_info, print_skipped_tree, print_success, print_warning
from core.config import Settings, load_settings
from core.exceptions import CollectionError, ConfigurationError, DescribeFailure, NormalizationFault
from core.inventory import CollectionResult, ErrorPolicy, ResourceCollector, ResourceKind, get_kind, get_policy
from core.output import OutputConfig, create_sink
from core.parallel import create_session
from core.region import region_source_from_settings

logger = logging.getLogger(__name__)

DEFAULT_POLICY = "default"


@dataclass
class HeadlessConfig:
    """수집 실행 설정"""

    kind: str

    # 대상 / 인증
    regions: list[str] = field(default_factory=list)
    profile: str | None = None

    # 실패 정책 ("default"면 리소스 종류 기본값)
    policy: str = DEFAULT_POLICY

    # 병렬 실행 (None이면 환경 변수 설정)
    workers: int | None = None
    detail_workers: int | None = None

    # 출력
    format: str = "table"
    output: str | None = None


class HeadlessRunner:
    """리소스 종류 하나를 수집하고 출력하는 실행기"""

    def __init__(self, config: HeadlessConfig):
        self.config = config

    def run(self) -> int:
        """수집 실행

        Returns:
            0: 성공, 1: 실패, 130: 사용자 중단
        """
        try:
            kind = self._resolve_kind()
            output_config = self._output_config(kind)
            settings = load_settings()
            collector = self._build_collector(kind, settings)

            result = collector.collect()
            try:
                self._write(output_config, result)
            except OSError as e:
                print_error(f"출력 파일을 쓸 수 없습니다 ({output_config.output_path}): {e}")
                return 1
            self._print_summary(output_config, result)
            self._print_skipped(result)
            return 0

        except ConfigurationError as e:
            print_error(str(e))
            return 1
        except CollectionError as e:
            print_error(self._format_abort(e))
            return 1
        except NormalizationFault as e:
            print_error(str(e))
            logger.debug("정규화 결함 상세", exc_info=True)
            return 1
        except KeyboardInterrupt:
            print_warning("사용자에 의해 중단되었습니다")
            return 130

    def _build_collector(self, kind: ResourceKind, settings: Settings) -> ResourceCollector:
        policy = self._resolve_policy(kind)
        profile = self.config.profile or settings.profile

        try:
            session = create_session(profile)
        except BotoCoreError as e:
            raise ConfigurationError("profile", f"세션을 만들 수 없습니다 ({profile})", cause=e) from e

        return ResourceCollector(
            kind,
            region_source_from_settings(settings, self.config.regions),
            session=session,
            policy=policy,
            max_workers=self.config.workers or settings.max_workers,
            detail_workers=self.config.detail_workers or settings.detail_workers,
        )

    def _resolve_kind(self) -> ResourceKind:
        try:
            return get_kind(self.config.kind)
        except KeyError as e:
            raise ConfigurationError("kind", e.args[0], cause=e) from e

    def _resolve_policy(self, kind: ResourceKind) -> ErrorPolicy:
        if self.config.policy == DEFAULT_POLICY:
            return kind.policy
        try:
            return get_policy(self.config.policy)
        except ValueError as e:
            raise ConfigurationError("policy", str(e), cause=e) from e

    def _output_config(self, kind: ResourceKind) -> OutputConfig:
        output_config = OutputConfig.from_string(self.config.format, self.config.output, title=kind.title)
        if output_config.should_output_xlsx() and not output_config.output_path:
            raise ConfigurationError("output", "xlsx 형식은 -o/--output 경로가 필요합니다")
        return output_config

    @staticmethod
    def _write(output_config: OutputConfig, result: CollectionResult) -> None:
        """결과 출력 (수집이 끝난 뒤에만 파일을 엽니다)"""
        if output_config.output_path is None or output_config.should_output_xlsx():
            create_sink(output_config).write(result)
            return

        with open(output_config.output_path, "w", newline="", encoding="utf-8") as f:
            create_sink(output_config, f).write(result)

    @staticmethod
    def _format_abort(error: CollectionError) -> str:
        target = f"{error.region}/{error.summary_id}" if isinstance(error, DescribeFailure) else error.region
        return f"{error.kind} 수집 중단 - region: {target}, operation: {error.operation}, cause: {error.cause}"

    @staticmethod
    def _print_summary(output_config: OutputConfig, result: CollectionResult) -> None:
        if result.record_count == 0:
            print_info(f"{result.kind}: 조회된 리소스가 없습니다 (리전 {len(result.regions)}개)")
        if output_config.output_path:
            print_success(f"{result.kind}: {result.record_count}건 저장 - {output_config.output_path}")

    @staticmethod
    def _print_skipped(result: CollectionResult) -> None:
        if not result.has_skips:
            return
        print_warning(f"{result.kind}: 건너뜀 {len(result.skipped)}건")
        print_skipped_tree(result.skipped)


def run_headless(
    kind: str,
    regions: list[str] | None = None,
    profile: str | None = None,
    policy: str = DEFAULT_POLICY,
    workers: int | None = None,
    detail_workers: int | None = None,
    format: str = "table",
    output: str | None = None,
) -> int:
    """수집 실행 편의 함수

    Args:
        kind: 리소스 종류 이름 (예: "rds")
        regions: 리전 목록 (비어 있으면 인가된 리전 설정)
        profile: boto3 named profile
        policy: 실패 정책 이름 ("default", "fail-fast", "best-effort", "skip-items")
        workers: 리전 병렬 워커 수
        detail_workers: 상세 조회 병렬 워커 수
        format: 출력 형식 ("table", "csv", "json", "xlsx")
        output: 출력 파일 경로

    Returns:
        0: 성공, 1: 실패, 130: 사용자 중단
    """
    config = HeadlessConfig(
        kind=kind,
        regions=list(regions or []),
        profile=profile,
        policy=policy,
        workers=workers,
        detail_workers=detail_workers,
        format=format,
        output=output,
    )
    return HeadlessRunner(config).run()
