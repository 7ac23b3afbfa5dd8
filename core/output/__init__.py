"""
core/output - 수집 결과 출력

TableSink 구현체(rich 테이블, CSV, JSON, xlsx)와 출력 설정을 제공합니다.
"""

from .config import OutputConfig, OutputFormat
from .excel import XlsxTableSink
from .table import CsvTableSink, JsonTableSink, RichTableSink, TableSink, create_sink

__all__ = [
    "OutputConfig",
    "OutputFormat",
    "TableSink",
    "RichTableSink",
    "CsvTableSink",
    "JsonTableSink",
    "XlsxTableSink",
    "create_sink",
]
