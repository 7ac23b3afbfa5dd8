"""
core/parallel/executor.py - 순서 보존 병렬 실행기

ThreadPoolExecutor 기반으로 작업을 병렬 실행하되, 결과는 항상 입력 순서대로
반환합니다. 한 작업이 실패하면 공유 취소 이벤트를 설정하고 대기 중인 작업을
취소합니다 (협조적 취소). 실행 중인 작업은 ``check_cancelled()``로 다음 호출
전에 멈춥니다.

주요 구성 요소:
- TaskCancelled: 취소 이벤트를 감지한 작업이 던지는 예외
- check_cancelled: 취소 여부 확인 헬퍼
- ordered_map: 순서 보존 병렬 map

Example:
    cancel = threading.Event()

    def work(region):
        check_cancelled(cancel)
        return collect(region)

    results = ordered_map(work, regions, max_workers=4, cancel_event=cancel)
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Sequence
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from typing import TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


class TaskCancelled(Exception):
    """다른 작업의 실패로 취소된 작업"""


def check_cancelled(cancel_event: threading.Event | None) -> None:
    """취소 이벤트가 설정되어 있으면 TaskCancelled 발생"""
    if cancel_event is not None and cancel_event.is_set():
        raise TaskCancelled()


def ordered_map(
    func: Callable[[T], R],
    items: Sequence[T],
    max_workers: int = 1,
    cancel_event: threading.Event | None = None,
) -> list[R]:
    """func를 items에 적용하고 입력 순서대로 결과 반환

    max_workers가 1 이하이면 호출 스레드에서 순차 실행하며, 첫 예외가 즉시 전파됩니다.

    병렬 실행 시 예외가 발생하면:
    1. cancel_event를 설정하고 아직 시작하지 않은 작업을 취소
    2. 실행 중인 작업이 끝날 때까지 대기
    3. 입력 순서상 가장 앞선 실패(TaskCancelled 제외)를 다시 발생

    Args:
        func: 단일 항목 처리 함수
        items: 처리할 항목 (순서가 결과 순서)
        max_workers: 최대 동시 스레드 수
        cancel_event: 공유 취소 이벤트 (None이면 내부 생성)

    Returns:
        입력 순서와 같은 결과 리스트
    """
    if max_workers <= 1 or len(items) <= 1:
        results = []
        for item in items:
            check_cancelled(cancel_event)
            results.append(func(item))
        return results

    event = cancel_event if cancel_event is not None else threading.Event()

    def _run(item: T) -> R:
        check_cancelled(event)
        return func(item)

    results_by_index: dict[int, R] = {}
    errors_by_index: dict[int, BaseException] = {}

    with ThreadPoolExecutor(max_workers=min(max_workers, len(items))) as executor:
        futures: dict[Future[R], int] = {executor.submit(_run, item): i for i, item in enumerate(items)}

        for future in as_completed(futures):
            index = futures[future]
            if future.cancelled():
                continue

            error = future.exception()
            if error is None:
                results_by_index[index] = future.result()
                continue

            errors_by_index[index] = error
            if not event.is_set():
                logger.debug("작업 %d 실패, 나머지 작업 취소: %s", index, error)
                event.set()
            for pending in futures:
                pending.cancel()

    if errors_by_index:
        ordered = sorted(errors_by_index)
        primary = next((i for i in ordered if not isinstance(errors_by_index[i], TaskCancelled)), ordered[0])
        raise errors_by_index[primary]

    return [results_by_index[i] for i in range(len(items))]
