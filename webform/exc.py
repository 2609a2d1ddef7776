class WebformException(Exception):
    """Base exception class."""

    pass


class ConfigurationError(WebformException):
    """A configuration option is invalid."""


class ConflictError(WebformException):
    """More than one radio button is checked in the same group."""

    def __init__(self, name: str):
        self.name = name
        msg = "Multiple radio buttons are checked in group: %r" % name
        super(ConflictError, self).__init__(msg)
