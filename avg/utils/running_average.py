import abc
from collections.abc import Iterable

from avg.errors import ConfigurationError
from avg.utils.debugging import checkraise


class RunningAverage(metaclass=abc.ABCMeta):
    @abc.abstractmethod
    def observe(self, value: float) -> float:
        assert False

    def extend(self, values: Iterable[float]) -> float:
        for value in values:
            self.observe(value)

        return self.value()

    @abc.abstractmethod
    def value(self) -> float:
        assert False


class CumulativeAverage(RunningAverage):
    """Running arithmetic mean of every value observed since the last reset.

    Uses the running-sum form `total / count` rather than the incremental
    update `CA[i+1] = (x[i+1] + i * CA[i]) / (i + 1)`; both are equivalent.
    """

    def __init__(self):
        self.reset()

    def reset(self):
        self.total = 0.0
        self.count = 0
        self.average = 0.0

    def observe(self, value: float) -> float:
        self.total += value
        self.count += 1
        self.average = self.total / self.count
        return self.average

    def value(self) -> float:
        return self.average


class SimpleMovingAverage(RunningAverage):
    """Mean of per-window means.

    Raw values are collapsed into the mean of each consecutive group of
    `window_size` values, and those window means are averaged cumulatively.
    Values of a trailing window which never fills up do not contribute.
    """

    def __init__(self, window_size: int):
        self.window = CumulativeAverage()
        self.output = CumulativeAverage()
        self.reset(window_size)

    def reset(self, window_size: int):
        checkraise(
            window_size >= 1,
            ConfigurationError,
            'window size should be positive, got {}',
            window_size,
        )

        self.window.reset()
        self.output.reset()
        self.window_size = window_size

    def observe(self, value: float) -> float:
        self.window.observe(value)

        if self.window.count == self.window_size:
            self.output.observe(self.window.value())
            self.window.reset()

        return self.output.value()

    def value(self) -> float:
        return self.output.value()
