"""Single-level list reordering."""

from typing import Sequence, TypeVar

from orderomatic.ordering.types import Metric

T = TypeVar("T")


def relocate(sequence: Sequence[T], index: int, new_index: int) -> list[T]:
    """
    Move one element of a sequence to a new position.

    Args:
        sequence: Elements in their current order (never modified)
        index: Current position of the element to move
        new_index: Position the element should occupy afterwards

    Returns:
        A new list with the element relocated, or a copy of the input when
        either index is out of bounds
    """
    if new_index < 0 or new_index >= len(sequence):
        return list(sequence)
    if index < 0 or index >= len(sequence):
        return list(sequence)

    reordered = list(sequence)
    source = reordered.pop(index)
    reordered.insert(new_index, source)
    return reordered


def move_metric(metrics: Sequence[Metric], index: int, new_index: int) -> list[Metric]:
    """Reorder the metrics of a Metrics widget."""
    return relocate(metrics, index, new_index)
