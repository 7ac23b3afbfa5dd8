"""
core/output/excel.py - Excel(xlsx) 테이블 sink

openpyxl로 단일 시트 워크북을 만듭니다. 헤더 행 스타일, 자동 필터,
헤더 틀 고정, 컬럼 너비 자동 조정을 적용합니다.

Usage:
    from core.output.excel import XlsxTableSink

    sink = XlsxTableSink("rds.xlsx", title="RDS Instances")
    sink.write(result)
"""

from __future__ import annotations

import logging
import re
from typing import IO

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter

from .table import TableSink

logger = logging.getLogger(__name__)

# 헤더 색상 (RGB Hex)
COLOR_HEADER_BG = "4472C4"
COLOR_HEADER_FG = "FFFFFF"

MIN_COLUMN_WIDTH = 10
MAX_COLUMN_WIDTH = 60
SHEET_TITLE_LIMIT = 31
DEFAULT_SHEET_TITLE = "Inventory"

_INVALID_SHEET_CHARS = re.compile(r"[\\/?*\[\]:]")


def sheet_title(title: str | None) -> str:
    """Excel 시트 이름 규칙에 맞게 변환 (금지 문자 제거, 31자 제한)"""
    cleaned = _INVALID_SHEET_CHARS.sub("_", title or "").strip()
    return cleaned[:SHEET_TITLE_LIMIT] or DEFAULT_SHEET_TITLE


def _thin_border() -> Border:
    side = Side(style="thin", color="808080")
    return Border(left=side, right=side, top=side, bottom=side)


class XlsxTableSink(TableSink):
    """단일 시트 xlsx 출력

    Args:
        target: 저장 경로 또는 바이너리 스트림
        title: 시트 이름
    """

    def __init__(self, target: str | IO[bytes], title: str | None = None):
        super().__init__()
        self.target = target
        self.title = title

    def _render(self, headers: tuple[str, ...], rows: list[tuple[str, ...]]) -> None:
        wb = Workbook()
        ws = wb.active
        ws.title = sheet_title(self.title)

        border = _thin_border()
        header_font = Font(bold=True, color=COLOR_HEADER_FG)
        header_fill = PatternFill(start_color=COLOR_HEADER_BG, end_color=COLOR_HEADER_BG, fill_type="solid")
        header_align = Alignment(horizontal="center", vertical="center")

        ws.append(list(headers))
        for cell in ws[1]:
            cell.font = header_font
            cell.fill = header_fill
            cell.border = border
            cell.alignment = header_align

        for row in rows:
            ws.append(list(row))

        widths = [len(h) for h in headers]
        for row in rows:
            for i, value in enumerate(row):
                widths[i] = max(widths[i], len(value))
        for i, width in enumerate(widths, start=1):
            ws.column_dimensions[get_column_letter(i)].width = min(max(width + 2, MIN_COLUMN_WIDTH), MAX_COLUMN_WIDTH)

        if headers:
            ws.auto_filter.ref = f"A1:{get_column_letter(len(headers))}{len(rows) + 1}"
        ws.freeze_panes = "A2"

        wb.save(self.target)
        logger.debug("xlsx 저장: %s (%d행)", self.target, len(rows))
