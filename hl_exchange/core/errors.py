"""
Exception hierarchy for request construction, signing and submission.

Nothing in this package retries: every error is raised to the immediate
caller, since resending a malformed trading instruction is never safe.
"""


class HLExchangeError(Exception):
    """Base class for all hl_exchange errors."""


class EncodingError(HLExchangeError):
    """A value could not be reduced to its wire representation."""

    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(f"{path}: {message}")


class MissingRequiredFieldError(EncodingError):
    """A required field was never set at the time of encoding."""

    def __init__(self, path: str):
        super().__init__(path, "required field is missing")


class InvalidOrderTypeError(EncodingError):
    """An order type has both or neither of its limit/trigger branches set."""

    def __init__(self, path: str, message: str = "exactly one of limit/trigger must be set"):
        super().__init__(path, message)


class SigningError(HLExchangeError):
    """The signing collaborator rejected its inputs."""


class TransportError(HLExchangeError):
    """The exchange could not be reached or answered with an error status."""

    def __init__(self, message: str, status_code=None):
        self.status_code = status_code
        super().__init__(message)


class ClientNotConfiguredError(HLExchangeError):
    """An operation needs a client, wallet or signer that was not provided."""
