import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from itertools import islice
from typing import Iterable, Iterator, List, Tuple

from segregatezeros.lines import parse_line
from segregatezeros.segregator import segregate

logger = logging.getLogger(__name__)

# lines handed to the pool per batch, per worker
BATCH_PER_WORKER = 64


@dataclass
class LineResult:
    line_number: int
    values: List[int] = field(default_factory=list)


def process_line(line: str, line_number: int) -> LineResult:
    nums = parse_line(line, line_number)
    segregate(nums)
    logger.debug(f"line {line_number}: {len(nums)} values, {nums.count(0)} zeros")
    return LineResult(line_number, nums)


def _batches(numbered: Iterator[Tuple[int, str]], size: int) -> Iterator[List[Tuple[int, str]]]:
    while True:
        batch = list(islice(numbered, size))
        if not batch:
            return
        yield batch


def process_lines(lines: Iterable[str], max_workers: int = 1) -> Iterator[LineResult]:
    """
    按输入顺序处理每一行，max_workers > 1 时用线程池并行处理

    每一行都是独立的任务，各自持有自己的列表；结果始终按输入顺序返回，
    遇到第一行格式错误就抛出异常，不会跳过坏行。

    Args:
        lines: 文本行
        max_workers: 线程数

    Returns:
        LineResult 迭代器
    """
    numbered = enumerate(lines, start=1)
    if max_workers <= 1:
        for line_number, line in numbered:
            yield process_line(line, line_number)
        return

    logger.info(f"processing lines with {max_workers} workers")
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        for batch in _batches(numbered, max_workers * BATCH_PER_WORKER):
            futures = [executor.submit(process_line, line, line_number) for line_number, line in batch]
            for future in futures:
                yield future.result()
