"""
cli/ui/console.py - Rich 콘솔 유틸리티

일관된 콘솔 출력을 위한 함수들. 테이블 본문은 stdout(sink)으로,
진단 메시지는 모두 stderr 콘솔로 출력합니다.
"""

from __future__ import annotations

import logging
import platform
from collections.abc import Iterable

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from core.parallel.errors import CollectedError

# botocore 노이즈 로그 제한
logging.getLogger("botocore.httpchecksum").setLevel(logging.WARNING)
logging.getLogger("botocore.credentials").setLevel(logging.WARNING)
logging.getLogger("botocore.loaders").setLevel(logging.WARNING)
logging.getLogger("botocore.session").setLevel(logging.WARNING)
logging.getLogger("urllib3.connectionpool").setLevel(logging.WARNING)


def get_console(stderr: bool = False) -> Console:
    """Rich Console 인스턴스를 생성하고 반환합니다.

    Args:
        stderr: True면 stderr로 출력하는 콘솔
    """
    is_windows = platform.system().lower() == "windows"

    return Console(
        stderr=stderr,
        color_system="auto",
        highlight=False,
        soft_wrap=True,
        markup=True,
        emoji=not is_windows,
    )


# 전역 콘솔 인스턴스
console = get_console()
err_console = get_console(stderr=True)


def configure_logging(debug: bool = False) -> None:
    """--debug 지정 시 DEBUG 레벨 + RichHandler(stderr)로 전환

    지정하지 않으면 cli.app의 basicConfig(WARNING) 설정을 그대로 둡니다.
    """
    if not debug:
        return

    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = RichHandler(console=err_console, rich_tracebacks=True, show_path=False)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s", datefmt="[%X]"))
    root.addHandler(handler)
    root.setLevel(logging.DEBUG)


# =============================================================================
# 표준 출력 스타일
# =============================================================================

# 상태 심볼
SYMBOL_SUCCESS = "✓"  # 완료
SYMBOL_ERROR = "✗"  # 에러
SYMBOL_WARNING = "!"  # 경고
SYMBOL_INFO = "•"  # 정보


def print_success(message: str) -> None:
    """성공 메시지 출력 (초록색 체크마크, stderr)"""
    err_console.print(f"[green]{SYMBOL_SUCCESS} {escape(message)}[/green]")


def print_error(message: str) -> None:
    """에러 메시지 출력 (빨간색 X, stderr)

    Args:
        message: 출력할 메시지
    """
    err_console.print(f"[red]{SYMBOL_ERROR} {escape(message)}[/red]")


def print_warning(message: str) -> None:
    """경고 메시지 출력 (노란색 경고, stderr)"""
    err_console.print(f"[yellow]{SYMBOL_WARNING} {escape(message)}[/yellow]")


def print_info(message: str) -> None:
    err_console.print(f"[blue]{SYMBOL_INFO} {escape(message)}[/blue]")


def print_skipped_tree(errors: Iterable[CollectedError], title: str = "건너뜀 요약") -> None:
    """skip 처리된 실패를 에러 코드별 트리로 출력 (stderr)

    Example:
        건너뜀 요약
        └── AccessDenied (2건)
            ├── us-east-1/zone-a - get_hosted_zone
            └── us-east-1/zone-b - get_hosted_zone
    """
    grouped: dict[str, list[CollectedError]] = {}
    for error in errors:
        grouped.setdefault(error.error_code, []).append(error)

    if not grouped:
        return

    tree = Tree(f"[bold yellow]{title}[/bold yellow]")
    for code, items in grouped.items():
        branch = tree.add(f"[red]{code}[/red] ({len(items)}건)")
        for item in items:
            target = f"{item.region}/{item.resource_id}" if item.resource_id else item.region
            branch.add(f"[dim]{escape(target)} - {item.operation}[/dim]")
    err_console.print(tree)


def print_table(
    title: str,
    columns: list[str],
    rows: list[list],
) -> None:
    """테이블 형식으로 데이터를 출력합니다 (stdout).

    Args:
        title: 테이블 제목
        columns: 컬럼 헤더 리스트
        rows: 행 데이터 리스트
    """
    table = Table(title=title, show_header=True, header_style="bold magenta")

    for column in columns:
        table.add_column(column)

    for row in rows:
        table.add_row(*[str(cell) for cell in row])

    console.print(table)
