from segregatezeros.lines import LineFormatError, format_sequence, parse_line, read_lines
from segregatezeros.segregator import segregate

__all__ = ["segregate", "parse_line", "format_sequence", "read_lines", "LineFormatError"]
