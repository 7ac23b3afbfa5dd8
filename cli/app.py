"""
cli/app.py - 메인 CLI 엔트리포인트

Click 기반의 CLI 애플리케이션 진입점입니다.
리소스 종류 레지스트리(RESOURCE_KINDS)에서 명령어를 자동 등록합니다.

명령어 구조:
    lookr                       # 도움말
    lookr --version             # 버전 표시
    lookr kinds                 # 지원 리소스 종류 목록
    lookr <kind> [options]      # 리소스 종류별 수집

    예시:
    lookr ec2                   # EC2 인스턴스 목록
    lookr route53 -f csv        # Route53 Hosted Zone (CSV)

Usage:
    $ lookr rds -r us-east-1
    $ python -m cli.app rds
"""

import logging
from collections.abc import Callable
from typing import Any

import click
from click import Command, Context, HelpFormatter

from cli.headless import DEFAULT_POLICY, run_headless
from cli.ui.console import configure_logging, print_table
from core.config import MAX_WORKERS_LIMIT, get_version
from core.inventory import NAMED_POLICIES, RESOURCE_KINDS, ResourceKind

# WARNING 레벨로 설정하여 INFO 로그가 테이블 출력에 섞이지 않도록 함
logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

VERSION = get_version()

# 유틸리티 명령어 목록 (리소스 명령어와 분리 표시용)
UTILITY_COMMANDS = {"kinds"}

POLICY_CHOICES = [DEFAULT_POLICY, *NAMED_POLICIES]
FORMAT_CHOICES = ["table", "csv", "json", "xlsx"]


class GroupedCommandsGroup(click.Group):
    """명령어를 리소스/유틸리티로 분리해서 표시하는 커스텀 Click 그룹"""

    def format_commands(self, ctx: Context, formatter: HelpFormatter) -> None:
        """명령어를 그룹화해서 표시"""
        utility_cmds: list[tuple[str, str]] = []
        resource_cmds: list[tuple[str, str]] = []

        for name in self.list_commands(ctx):
            cmd = self.get_command(ctx, name)
            if cmd is None or cmd.hidden:
                continue
            help_text = cmd.get_short_help_str(limit=formatter.width)
            if name in UTILITY_COMMANDS:
                utility_cmds.append((name, help_text))
            else:
                resource_cmds.append((name, help_text))

        if utility_cmds:
            with formatter.section("Utilities"):
                formatter.write_dl(utility_cmds)

        if resource_cmds:
            with formatter.section("AWS Resources"):
                formatter.write_dl(resource_cmds)


def collection_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """리소스 명령어 공통 옵션"""
    options = [
        click.option("-r", "--region", "regions", multiple=True, help="리전 (다중 가능, 기본: 인가된 리전 설정)"),
        click.option("-p", "--profile", default=None, help="AWS named profile"),
        click.option(
            "--policy",
            type=click.Choice(POLICY_CHOICES),
            default=DEFAULT_POLICY,
            show_default=True,
            help="부분 실패 정책",
        ),
        click.option(
            "-w",
            "--workers",
            type=click.IntRange(1, MAX_WORKERS_LIMIT),
            default=None,
            help="리전 병렬 워커 수 (기본: 1 = 순차)",
        ),
        click.option(
            "--detail-workers",
            type=click.IntRange(1, MAX_WORKERS_LIMIT),
            default=None,
            help="리전 내 상세 조회 워커 수",
        ),
        click.option(
            "-f", "--format", "output_format", type=click.Choice(FORMAT_CHOICES), default="table", show_default=True
        ),
        click.option("-o", "--output", default=None, help="출력 파일 경로"),
        click.option("--debug", is_flag=True, help="DEBUG 로그를 stderr로 출력"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _make_kind_command(kind: ResourceKind) -> Command:
    """ResourceKind → Click 명령어"""

    @click.command(name=kind.name, help=f"{kind.title} 목록 조회")
    @collection_options
    def kind_cmd(
        regions: tuple[str, ...],
        profile: str | None,
        policy: str,
        workers: int | None,
        detail_workers: int | None,
        output_format: str,
        output: str | None,
        debug: bool,
    ) -> None:
        configure_logging(debug)
        exit_code = run_headless(
            kind.name,
            regions=list(regions),
            profile=profile,
            policy=policy,
            workers=workers,
            detail_workers=detail_workers,
            format=output_format,
            output=output,
        )
        raise SystemExit(exit_code)

    return kind_cmd


@click.group(cls=GroupedCommandsGroup)
@click.version_option(VERSION, prog_name="lookr")
def cli() -> None:
    """lookr - 멀티 리전 AWS 리소스 인벤토리

    \b
    인가된 모든 리전에서 리소스 종류별 목록을 조회해
    하나의 테이블로 출력합니다 (읽기 전용).
    """


@cli.command("kinds")
@click.option("--json", "as_json", is_flag=True, help="JSON 형식으로 출력")
def kinds_command(as_json: bool) -> None:
    """지원 리소스 종류 목록

    \b
    Examples:
        lookr kinds             # 표 형식
        lookr kinds --json      # JSON 출력
    """
    if as_json:
        import json as json_module

        output_data = [
            {
                "name": kind.name,
                "title": kind.title,
                "policy": kind.policy.name,
                "global": kind.is_global,
                "headers": list(kind.headers),
            }
            for kind in RESOURCE_KINDS.values()
        ]
        click.echo(json_module.dumps(output_data, ensure_ascii=False, indent=2))
        return

    rows = [
        [kind.name, kind.title, kind.policy.name, "global" if kind.is_global else "regional", ", ".join(kind.headers)]
        for kind in RESOURCE_KINDS.values()
    ]
    print_table("Resource Kinds", ["Command", "Title", "Policy", "Scope", "Columns"], rows)


for _kind in RESOURCE_KINDS.values():
    cli.add_command(_make_kind_command(_kind))


if __name__ == "__main__":
    cli()
