"""
core/output/table.py - 테이블 출력 sink

수집기가 만든 Record를 받아 한 번에 렌더링합니다.

계약:
    1. set_header(headers)는 정확히 한 번 호출
    2. append(record)는 행마다 호출 (헤더와 컬럼 수가 다르면 ValueError)
    3. render()는 받은 순서 그대로 출력 스트림에 기록

Usage:
    from core.output import OutputConfig, create_sink

    sink = create_sink(OutputConfig.from_string("csv"), stream=sys.stdout)
    sink.set_header(("Volume ID", "Region"))
    sink.append(("vol-1", "US East (N. Virginia)"))
    sink.render()
"""

from __future__ import annotations

import csv
import json
import sys
from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from typing import IO

from rich.console import Console
from rich.table import Table

from core.inventory.types import CollectionResult, Record

from .config import OutputConfig, OutputFormat


class TableSink(ABC):
    """테이블 출력 sink 베이스 클래스

    Args:
        stream: 출력 스트림 (None이면 sys.stdout)
    """

    def __init__(self, stream: IO[str] | None = None):
        self.stream = stream if stream is not None else sys.stdout
        self._headers: tuple[str, ...] | None = None
        self._rows: list[tuple[str, ...]] = []

    @property
    def headers(self) -> tuple[str, ...] | None:
        return self._headers

    @property
    def rows(self) -> list[tuple[str, ...]]:
        return list(self._rows)

    def set_header(self, headers: Iterable[str]) -> None:
        if self._headers is not None:
            raise ValueError("헤더는 한 번만 설정할 수 있습니다")
        self._headers = tuple(headers)

    def append(self, record: Record | Sequence[str]) -> None:
        if self._headers is None:
            raise ValueError("append 전에 set_header가 필요합니다")
        values = record.values if isinstance(record, Record) else tuple(record)
        if len(values) != len(self._headers):
            raise ValueError(f"컬럼 수 불일치: 값 {len(values)}개, 헤더 {len(self._headers)}개")
        self._rows.append(values)

    def render(self) -> None:
        if self._headers is None:
            raise ValueError("render 전에 set_header가 필요합니다")
        self._render(self._headers, self._rows)

    def write(self, result: CollectionResult) -> None:
        """수집 결과 전체를 헤더 → 행 → render 순서로 출력"""
        self.set_header(result.headers)
        for record in result.records:
            self.append(record)
        self.render()

    @abstractmethod
    def _render(self, headers: tuple[str, ...], rows: list[tuple[str, ...]]) -> None:
        """형식별 출력"""


class RichTableSink(TableSink):
    """rich 테두리 테이블"""

    def __init__(self, stream: IO[str] | None = None, title: str | None = None):
        super().__init__(stream)
        self.title = title

    def _render(self, headers: tuple[str, ...], rows: list[tuple[str, ...]]) -> None:
        table = Table(title=self.title, show_header=True, header_style="bold magenta")

        for header in headers:
            table.add_column(header, overflow="fold")

        for row in rows:
            table.add_row(*row)

        Console(file=self.stream, markup=False, highlight=False).print(table)


class CsvTableSink(TableSink):
    def _render(self, headers: tuple[str, ...], rows: list[tuple[str, ...]]) -> None:
        writer = csv.writer(self.stream)
        writer.writerow(headers)
        writer.writerows(rows)


class JsonTableSink(TableSink):
    """헤더를 키로 하는 객체 배열"""

    def _render(self, headers: tuple[str, ...], rows: list[tuple[str, ...]]) -> None:
        items = [dict(zip(headers, row)) for row in rows]
        json.dump(items, self.stream, ensure_ascii=False, indent=2)
        self.stream.write("\n")


def create_sink(config: OutputConfig, stream: IO[str] | None = None) -> TableSink:
    """OutputConfig에 맞는 sink 생성

    XLSX는 stream 대신 config.output_path에 저장합니다.

    Raises:
        ValueError: XLSX 형식인데 output_path가 없는 경우
    """
    if config.format is OutputFormat.XLSX:
        from .excel import XlsxTableSink

        if not config.output_path:
            raise ValueError("xlsx 형식은 출력 파일 경로가 필요합니다")
        return XlsxTableSink(config.output_path, title=config.title)
    if config.format is OutputFormat.CSV:
        return CsvTableSink(stream)
    if config.format is OutputFormat.JSON:
        return JsonTableSink(stream)
    return RichTableSink(stream, title=config.title)
