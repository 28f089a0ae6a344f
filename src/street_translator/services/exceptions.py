"""Exception hierarchy for translation services."""


class StreetTranslatorError(Exception):
    """Base class for all street translator errors."""


class ProviderUnavailable(StreetTranslatorError):
    """A provider cannot be used at all (e.g. no credential configured)."""


class ProviderError(StreetTranslatorError):
    """A provider was called and failed (transport, status or empty body)."""


class PersistenceError(StreetTranslatorError):
    """The backing key-value medium could not be read or written."""
