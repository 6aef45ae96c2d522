"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class ProviderError(AdapterError):
    """External provider error."""

    pass


class IdentityProviderError(ProviderError):
    """Identity provider rejected a request or could not be reached."""

    pass


class LanguageModelError(ProviderError):
    """Language model call failed.

    The message is surfaced verbatim to API clients, so it carries the
    upstream status and body when there is one.
    """

    pass
