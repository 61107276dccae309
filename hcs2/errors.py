# hcs2/errors.py
"""Error types shared by the flows and the CLI."""

from typing import Iterable, Optional


class HCS2Error(RuntimeError):
    """Base error."""


class ConfigurationError(HCS2Error):
    """Environment is missing or misconfigured."""


class MissingEnvironmentError(ConfigurationError):
    """One or more required environment variables are not set."""

    def __init__(self, missing: Iterable[str]):
        self.missing = list(missing)
        super().__init__(
            f"Missing required environment variables: {', '.join(self.missing)}"
        )


class ValidationError(HCS2Error):
    """User input was rejected."""


class InvalidKeyError(ValidationError):
    """A private key string could not be parsed."""


class UnsupportedOperationError(HCS2Error):
    """Operation name outside register/delete/update/migrate."""

    def __init__(self, name: object):
        self.name = name
        super().__init__(f"Invalid operation selected: {name!r}")


class LedgerOperationError(HCS2Error):
    """The ledger client failed during freeze/sign/execute/receipt."""

    def __init__(self, message: str, *, status: Optional[str] = None):
        super().__init__(message)
        self.status = status
