"""Tests for rational beat positions."""

import pytest

from maniaconv.features.timeline import RationalBeat


def test_from_sequence_and_float() -> None:
    beat = RationalBeat.from_sequence([3, 1, 4])

    assert beat == RationalBeat(3, 1, 4)
    assert beat.to_float() == 3.25
    assert beat.as_list() == [3, 1, 4]


@pytest.mark.parametrize(
    "values",
    [
        [0, 0, 0],
        [1, 2],
        [1, 2, 3, 4],
        [True, 0, 1],
        [1.5, 0, 1],
        [-1, 0, 1],
        [0, -1, 4],
    ],
)
def test_from_sequence_rejects_invalid_triples(values: list[object]) -> None:
    with pytest.raises(ValueError):
        _ = RationalBeat.from_sequence(values)  # pyright: ignore[reportArgumentType]
