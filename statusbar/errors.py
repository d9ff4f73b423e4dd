class StatusError(RuntimeError):
    """
    Base class for failures that abort or degrade a status tick.

    A metric that does not exist on this host (no battery, no such network
    interface) is not an error: its sampler returns None instead.
    """


class ParseError(StatusError):
    """Kernel-exposed text did not have the expected shape."""


class SourceIOError(StatusError):
    """A metric source was present but could not be read."""


class ExternalToolError(StatusError):
    """The external volume query failed or printed something unparseable."""
