import logging
import os

import click

from segregatezeros.lines import LineFormatError, format_sequence, read_lines
from segregatezeros.logconfig import configure_logging
from segregatezeros.runner import process_lines

logger = logging.getLogger(__name__)


def worker_count() -> int:
    value = os.getenv("SEGREGATE_WORKERS", "1")
    try:
        workers = int(value)
    except ValueError:
        raise click.ClickException(f"SEGREGATE_WORKERS must be a positive integer, got {value!r}")
    if workers < 1:
        raise click.ClickException(f"SEGREGATE_WORKERS must be a positive integer, got {value!r}")
    return workers


@click.command()
@click.argument('file_path', type=click.Path(exists=True, dir_okay=False, readable=True))
def main(file_path):
    """Move the zeros of every comma separated line in FILE_PATH to the front and print the result."""
    configure_logging()
    workers = worker_count()
    logger.info(f"reading {file_path}")

    count = 0
    try:
        for result in process_lines(read_lines(file_path), max_workers=workers):
            click.echo(format_sequence(result.values))
            count += 1
    except LineFormatError as e:
        logger.error(f"Failed to parse {file_path}: {e}")
        raise click.ClickException(str(e))
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to read {file_path}: {e}")
        raise click.ClickException(f"Could not read {file_path}: {e}")

    logger.info(f"done. {count} lines processed")


if __name__ == '__main__':
    main()
