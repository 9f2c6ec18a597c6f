"""Exception types raised by xlinks outside the pure extraction core."""


class XlinksError(Exception):
    """Base class for xlinks errors."""


class ConfigError(XlinksError):
    """Configuration file could not be read or validated."""


class NoLinksError(XlinksError):
    """An export was requested for text without any X links."""
