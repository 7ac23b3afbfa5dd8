"""
core/inventory/normalize.py - 정규화 필드 헬퍼

AWS 응답의 선택적 필드를 안전한 문자열로 변환합니다.
모든 헬퍼는 총함수(total)입니다: 값이 없거나 형식이 다르면 예외 대신
문서화된 폴백 값을 반환합니다.

Usage:
    from core.inventory.normalize import dig, integer, text, yes_no

    row = (
        text(db.get("DBInstanceIdentifier")),
        integer(dig(db, "Endpoint", "Port")),     # 엔드포인트가 없으면 ""
        yes_no(db.get("MultiAZ")),
    )
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import datetime, timezone
from typing import Any

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def text(value: Any, default: str = "") -> str:
    """문자열 필드 (None이면 default)"""
    if value is None:
        return default
    if isinstance(value, str):
        return value
    return str(value)


def integer(value: Any, default: str = "") -> str:
    """정수 필드 (None이거나 숫자가 아니면 default)"""
    if value is None or isinstance(value, bool):
        return default
    try:
        return str(int(value))
    except (TypeError, ValueError):
        return default


def yes_no(value: Any) -> str:
    """불리언 필드 → "Yes"/"No" (None은 "No")"""
    return "Yes" if value else "No"


def dig(data: Any, *keys: str | int, default: Any = None) -> Any:
    """중첩 dict/list를 안전하게 탐색

    Example:
        dig(cluster, "ProvisionedThroughput", "ReadCapacityUnits")
        dig(cert, "DomainValidationOptions", 0, "ValidationMethod")
    """
    current = data
    for key in keys:
        if isinstance(key, int):
            if not isinstance(current, (list, tuple)) or not -len(current) <= key < len(current):
                return default
            current = current[key]
        else:
            if not isinstance(current, Mapping):
                return default
            current = current.get(key)
        if current is None:
            return default
    return current


def pick(data: Any, *keys: str, default: Any = None) -> Any:
    """여러 키 중 처음으로 값이 있는 항목 반환"""
    if not isinstance(data, Mapping):
        return default
    for key in keys:
        value = data.get(key)
        if value is not None:
            return value
    return default


def join_values(items: Iterable[Any] | None, key: str | None = None, sep: str = ", ") -> str:
    """목록 필드를 구분자로 연결 (비어 있으면 "")

    Args:
        items: 값 목록 또는 dict 목록
        key: dict 목록일 때 꺼낼 키
        sep: 구분자
    """
    if not items:
        return ""
    values = []
    for item in items:
        if key is not None:
            if not isinstance(item, Mapping):
                continue
            item = item.get(key)
        if item is not None:
            values.append(text(item))
    return sep.join(values)


def first_or(items: Iterable[Any] | None, default: str = "") -> str:
    """목록의 첫 번째 값 (없으면 default)"""
    if not items:
        return default
    for item in items:
        if item is not None:
            return text(item)
    return default


def timestamp(value: Any, default: str = "") -> str:
    """datetime 필드 → "YYYY-MM-DD HH:MM:SS UTC"

    timezone 정보가 있으면 UTC로 변환하고, 없으면 UTC 값으로 간주합니다.
    문자열은 이미 렌더링된 값으로 보고 그대로 반환합니다.
    """
    if value is None:
        return default
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc).strftime(TIMESTAMP_FORMAT) + " UTC"
    return text(value, default)


def epoch_timestamp(value: Any, default: str = "") -> str:
    """epoch 초 문자열/숫자 → "YYYY-MM-DD HH:MM:SS UTC" (소수점 이하 버림)

    파싱할 수 없는 값은 원본 문자열을 그대로 반환합니다.
    """
    if value is None:
        return default
    try:
        seconds = int(float(value))
        parsed = datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (TypeError, ValueError, OverflowError, OSError):
        return text(value, default)
    return timestamp(parsed, default)
