import logging
from collections.abc import Callable, Iterable
from typing import TextIO

from avg.config import RunConfig
from avg.errors import ConfigurationError
from avg.modes import RuntimeMode
from avg.utils.debugging import checkraise
from avg.utils.running_average import CumulativeAverage, SimpleMovingAverage

logger = logging.getLogger(__name__)

Runner = Callable[[RunConfig, Iterable[float], TextIO], int]


def write_value(out: TextIO, value: float):
    out.write(f'{value:.6f}\n')


def run_cumulative_average(
    config: RunConfig,
    values: Iterable[float],
    out: TextIO,
) -> int:
    average = CumulativeAverage()
    num_values = 0

    for value in values:
        num_values += 1
        mean = average.observe(value)

        if config.show_intermediates:
            write_value(out, mean)

    if not config.show_intermediates:
        write_value(out, average.value())

    return num_values


def run_simple_moving_average(
    config: RunConfig,
    values: Iterable[float],
    out: TextIO,
) -> int:
    average = SimpleMovingAverage(config.window_size)
    num_values = 0
    # counts raw values per group, independently of the accumulator's window
    group_count = 0

    for value in values:
        num_values += 1
        group_count += 1
        average.observe(value)

        if group_count == config.window_size:
            group_count = 0

            if config.show_intermediates:
                write_value(out, average.value())

    if group_count > 0:
        logger.info('discarding %d values of incomplete window', group_count)

    if not config.show_intermediates:
        write_value(out, average.value())

    return num_values


RUNNERS: dict[RuntimeMode, Runner] = {
    RuntimeMode.CUMULATIVE_AVERAGE: run_cumulative_average,
    RuntimeMode.SIMPLE_MOVING_AVERAGE: run_simple_moving_average,
}


def run(config: RunConfig, values: Iterable[float], out: TextIO) -> int:
    """Feeds `values` to the accumulator selected by `config.mode`.

    Averages are written to `out` as they are produced, and the number of
    values consumed is returned.
    """
    checkraise(
        config.mode in RUNNERS,
        ConfigurationError,
        'Unsupported runtime mode: {}',
        config.mode,
    )

    logger.info(
        'run %s window_size %d show_intermediates %s',
        config.mode.name,
        config.window_size,
        config.show_intermediates,
    )

    num_values = RUNNERS[config.mode](config, values, out)
    out.flush()

    logger.info('processed %d values', num_values)
    return num_values
