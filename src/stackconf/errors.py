"""Exceptions raised by stackconf."""


class ConfigurationError(Exception):
    """The caller assembled or used the configuration layers incorrectly.

    This signals a programming error (for example writing to a context
    whose layers are all read-only), not bad user input.
    """

    pass
