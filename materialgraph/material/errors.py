"""Exceptions raised by the material graph."""


class MaterialGraphError(Exception):
    """Base class for material graph errors."""
    pass


class ConnectionPointError(MaterialGraphError):
    """Connection points cannot be connected or disconnected as requested."""
    pass


class BuildError(MaterialGraphError):
    """Error during node material build."""
    pass


class UnknownBlockError(MaterialGraphError, KeyError):
    """Block class name is not registered."""

    def __str__(self) -> str:
        return Exception.__str__(self)
