"""Classic comparison sorts, each returning a new sorted list."""

from __future__ import annotations

from collections.abc import Iterable


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Bubble sort, stopping early once a pass makes no swap."""
    items = list(values)
    for last in range(len(items) - 1, 0, -1):
        swapped = False
        for j in range(last):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def insertion_sort(values: Iterable[int]) -> list[int]:
    """Insertion sort by adjacent swaps."""
    items = list(values)
    for i in range(len(items)):
        for j in range(i, 0, -1):
            if items[j] < items[j - 1]:
                items[j], items[j - 1] = items[j - 1], items[j]
    return items


def selection_sort(values: Iterable[int]) -> list[int]:
    """Selection sort: move the smallest remaining item to the front each pass."""
    items = list(values)
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def _merge(left: list[int], right: list[int]) -> list[int]:
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[int]) -> list[int]:
    """Stable top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) + 1) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _partition(items: list[int], start: int, end: int) -> int:
    pivot = items[start]
    pivot_index = start + sum(1 for value in items[start + 1 : end + 1] if value <= pivot)
    items[start], items[pivot_index] = items[pivot_index], items[start]
    i, j = start, end
    while i < pivot_index < j:
        while items[i] <= items[pivot_index]:
            i += 1
        while items[j] > items[pivot_index]:
            j -= 1
        if i < pivot_index < j:
            items[i], items[j] = items[j], items[i]
    return pivot_index


def quick_sort(values: Iterable[int]) -> list[int]:
    """Quicksort using the first item of each range as pivot."""
    items = list(values)

    def sort_range(start: int, end: int) -> None:
        if start >= end:
            return
        p = _partition(items, start, end)
        sort_range(start, p - 1)
        sort_range(p + 1, end)

    sort_range(0, len(items) - 1)
    return items