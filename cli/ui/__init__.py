# cli/ui - 콘솔 출력 컴포넌트 (rich)
"""
UI 컴포넌트 모듈

CLI 전용 콘솔 출력 헬퍼
"""

from .console import (
    SYMBOL_ERROR,
    SYMBOL_INFO,
    SYMBOL_SUCCESS,
    SYMBOL_WARNING,
    configure_logging,
    console,
    err_console,
    get_console,
    print_error,
    print_info,
    print_skipped_tree,
    print_success,
    print_table,
    print_warning,
)

__all__ = [
    "SYMBOL_ERROR",
    "SYMBOL_INFO",
    "SYMBOL_SUCCESS",
    "SYMBOL_WARNING",
    "configure_logging",
    "console",
    "err_console",
    "get_console",
    "print_error",
    "print_info",
    "print_skipped_tree",
    "print_success",
    "print_table",
    "print_warning",
]
