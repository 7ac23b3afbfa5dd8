"""출력 설정 모듈

수집 결과의 출력 형식 및 출력 대상 설정

Usage:
    from core.output.config import OutputConfig, OutputFormat

    config = OutputConfig.from_string("csv", output_path="rds.csv")

    if config.format is OutputFormat.CSV:
        ...
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class OutputFormat(Enum):
    """출력 형식

    - TABLE: rich 테이블 (터미널)
    - CSV: 헤더 행 + 레코드 행
    - JSON: 헤더를 키로 하는 객체 배열
    - XLSX: 단일 시트 Excel 워크북 (출력 경로 필요)
    """

    TABLE = "table"
    CSV = "csv"
    JSON = "json"
    XLSX = "xlsx"


@dataclass
class OutputConfig:
    """출력 설정

    Attributes:
        format: 출력 형식 (기본: TABLE)
        output_path: 출력 파일 경로 (None이면 stdout)
        title: 테이블 제목 (TABLE 형식에서만 사용)
    """

    format: OutputFormat = OutputFormat.TABLE
    output_path: str | None = None
    title: str | None = None

    def should_output_table(self) -> bool:
        return self.format is OutputFormat.TABLE

    def should_output_csv(self) -> bool:
        return self.format is OutputFormat.CSV

    def should_output_json(self) -> bool:
        return self.format is OutputFormat.JSON

    def should_output_xlsx(self) -> bool:
        return self.format is OutputFormat.XLSX

    @classmethod
    def from_string(cls, format_str: str, output_path: str | None = None, title: str | None = None) -> OutputConfig:
        """문자열에서 OutputConfig 생성

        Args:
            format_str: 형식 문자열 ("table", "csv", "json", "xlsx"). 알 수 없으면 TABLE
            output_path: 출력 파일 경로
            title: 테이블 제목
        """
        format_map = {f.value: f for f in OutputFormat}
        fmt = format_map.get(format_str.lower(), OutputFormat.TABLE)
        return cls(format=fmt, output_path=output_path, title=title)
