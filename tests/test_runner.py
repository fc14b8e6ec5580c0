import random

import pytest

from segregatezeros.lines import LineFormatError
from segregatezeros.runner import LineResult, process_line, process_lines


def test_process_line():
    assert process_line("0,1,2,0,3,0,0,4", 1) == LineResult(1, [0, 0, 0, 0, 1, 2, 3, 4])


def test_process_lines_in_order():
    results = list(process_lines(["1,0", "", "0,0"]))
    assert [r.line_number for r in results] == [1, 2, 3]
    assert [r.values for r in results] == [[0, 1], [], [0, 0]]


def test_threaded_matches_sequential():
    rng = random.Random(42)
    lines = [",".join(str(rng.choice([0, rng.randint(-9, 9)])) for _ in range(rng.randint(1, 30)))
             for _ in range(1000)]
    sequential = list(process_lines(lines))
    threaded = list(process_lines(lines, max_workers=4))
    assert threaded == sequential


@pytest.mark.parametrize("workers", [1, 3])
def test_bad_line_aborts(workers):
    results = process_lines(["1,0", "x", "0,2"], max_workers=workers)
    assert next(results).values == [0, 1]
    with pytest.raises(LineFormatError) as excinfo:
        next(results)
    assert excinfo.value.line_number == 2
