"""Result Merger - round-robin interleave + dedup by link"""

from typing import Iterable, Sequence

from .result import Result


def interleave(result_lists: Sequence[Sequence[Result]]) -> list[Result]:
    """엔진별 결과를 인덱스 순서로 번갈아 합칩니다.

    [a1, a2], [b1, b2, b3] -> [a1, b1, a2, b2, b3]
    """
    max_len = max((len(results) for results in result_lists), default=0)
    merged: list[Result] = []
    for i in range(max_len):
        for results in result_lists:
            if len(results) > i:
                merged.append(results[i])
    return merged


def unique_by_link(results: Iterable[Result]) -> list[Result]:
    """link 기준 첫 등장만 남깁니다 (순서 유지)"""
    seen: set[str] = set()
    unique: list[Result] = []
    for result in results:
        if result.link in seen:
            continue
        seen.add(result.link)
        unique.append(result)
    return unique


def merge_results(result_lists: Sequence[Sequence[Result]]) -> list[Result]:
    return unique_by_link(interleave(result_lists))
