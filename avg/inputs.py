import contextlib
import io
import logging
import sys
from collections.abc import Iterator
from typing import TextIO

from avg.errors import UnopenableInputError

logger = logging.getLogger(__name__)

# undecodable bytes become U+FFFD, which ends parsing like any other bad token
DECODING_ERRORS = 'replace'


@contextlib.contextmanager
def open_input(data_filename: str | None) -> Iterator[TextIO]:
    """Opens the data source; standard input when no filename is given.

    Standard input is never closed here, a named file is closed on exit.
    """
    if data_filename is None:
        logger.info('reading from standard input')
        if isinstance(sys.stdin, io.TextIOWrapper):
            sys.stdin.reconfigure(errors=DECODING_ERRORS)
        yield sys.stdin
        return

    logger.info('reading from %s', data_filename)
    try:
        f = open(data_filename, 'r', errors=DECODING_ERRORS)
    except OSError as e:
        raise UnopenableInputError(
            f'Cannot open data file {data_filename}: {e.strerror}'
        ) from e

    with f:
        yield f
