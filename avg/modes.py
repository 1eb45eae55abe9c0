import enum


class RuntimeMode(enum.Enum):
    UNKNOWN = enum.auto()
    CUMULATIVE_AVERAGE = enum.auto()
    SIMPLE_MOVING_AVERAGE = enum.auto()


RUNTIME_MODES: dict[str, RuntimeMode] = {
    'CMA': RuntimeMode.CUMULATIVE_AVERAGE,
    'SMA': RuntimeMode.SIMPLE_MOVING_AVERAGE,
}


def lookup_runtime_mode(name: str) -> RuntimeMode:
    return RUNTIME_MODES.get(name, RuntimeMode.UNKNOWN)
