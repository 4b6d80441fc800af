class OrreryError(Exception):
    """
    Base class for errors raised by the orrery engine
    """


class InvalidTimestep(OrreryError, ValueError):
    """
    Raised when the simulation clock is asked to move backwards. The clock is
    left untouched, so callers can recover and keep going.
    """


class NumericalDivergence(OrreryError, ArithmeticError):
    """
    Raised when Kepler's equation fails to converge. This only happens with
    corrupted orbital elements and should not be caught in normal operation.
    """


class ConfigurationError(OrreryError, ValueError):
    """
    Raised when a configuration value is missing or out of range
    """
