from dataclasses import dataclass

from avg.errors import ConfigurationError
from avg.modes import RuntimeMode, lookup_runtime_mode
from avg.utils.debugging import checkraise

DEFAULT_MODE = 'CMA'
DEFAULT_WINDOW_SIZE = 10


@dataclass(frozen=True)
class RunConfig:
    mode: RuntimeMode = RuntimeMode.CUMULATIVE_AVERAGE
    window_size: int = DEFAULT_WINDOW_SIZE
    show_intermediates: bool = False
    data_filename: str | None = None


def make_config(
    *,
    mode: str = DEFAULT_MODE,
    window_size: int = DEFAULT_WINDOW_SIZE,
    show_intermediates: bool = False,
    data_filename: str | None = None,
) -> RunConfig:
    runtime_mode = lookup_runtime_mode(mode)
    checkraise(
        runtime_mode is not RuntimeMode.UNKNOWN,
        ConfigurationError,
        'Unknown runtime mode: {}',
        mode,
    )
    checkraise(
        window_size >= 1,
        ConfigurationError,
        'Invalid window size: {}',
        window_size,
    )

    return RunConfig(
        mode=runtime_mode,
        window_size=window_size,
        show_intermediates=show_intermediates,
        data_filename=data_filename,
    )
