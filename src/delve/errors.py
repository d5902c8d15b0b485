class DelveError(Exception):
    """Base error for Delve domain exceptions."""


class OutOfBoundsError(DelveError, IndexError):
    """Raised by strict grid accessors when a coordinate lies outside the map."""


class GenerationConfigError(DelveError, ValueError):
    """Raised when dungeon generator parameters cannot produce a valid map."""


class DegenerateGenerationError(DelveError):
    """Raised in strict mode when generation accepted zero rooms."""


class ConfigError(DelveError, ValueError):
    """Raised when settings files or values are invalid."""
