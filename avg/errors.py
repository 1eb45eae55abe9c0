class AvgError(Exception):
    pass


class ConfigurationError(AvgError):
    """Invalid run configuration, e.g. unknown mode or window size."""


class UnopenableInputError(AvgError):
    """The named data file could not be opened for reading."""
