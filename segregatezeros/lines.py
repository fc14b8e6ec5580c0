import re
from typing import Iterator, List, Optional

INTEGER_TOKEN = re.compile(r"[+-]?[0-9]+")


class LineFormatError(ValueError):

    def __init__(self, token: str, line: str, line_number: Optional[int] = None):
        self.token = token
        self.line = line
        self.line_number = line_number
        where = f"line {line_number}" if line_number is not None else "line"
        super().__init__(f"Invalid integer {token!r} on {where}: {line!r}")


def read_lines(file_path: str) -> Iterator[str]:
    """
    逐行读取文件，不会一次性把整个文件读入内存

    Args:
        file_path: 文件路径

    Returns:
        行迭代器（去掉行尾换行符）
    """
    with open(file_path, 'r', encoding='utf-8') as f:
        for line in f:
            yield line.rstrip('\r\n')


def parse_line(line: str, line_number: Optional[int] = None) -> List[int]:
    """
    把逗号分隔的一行文本转换成整数列表，空行返回空列表

    Args:
        line: 例如 "0,1,2,0,3,0,0,4"
        line_number: 行号，仅用于错误信息

    Returns:
        整数列表
    """
    stripped = line.strip()
    if not stripped:
        return []
    result = []
    for token in stripped.split(','):
        token = token.strip()
        if not INTEGER_TOKEN.fullmatch(token):
            raise LineFormatError(token, line, line_number)
        result.append(int(token))
    return result


def format_sequence(nums: List[int]) -> str:
    return '[' + ', '.join(str(n) for n in nums) + ']'
