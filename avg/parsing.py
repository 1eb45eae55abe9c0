import logging
from collections.abc import Iterator
from typing import TextIO

logger = logging.getLogger(__name__)


def read_values(stream: TextIO) -> Iterator[float]:
    """Yields whitespace separated numbers from `stream`, in order.

    Iteration stops at the end of the stream or at the first token which does
    not parse as a number; the remainder of the stream is left unread.
    """
    for line in stream:
        for token in line.split():
            try:
                value = float(token)
            except ValueError:
                logger.debug('stopping at non-numeric token %r', token)
                return

            yield value
