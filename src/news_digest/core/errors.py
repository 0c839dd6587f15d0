"""Error types."""


class NewsDigestError(Exception):
    """Base error for the digest pipeline."""


class ConfigurationError(NewsDigestError):
    """Invalid or missing configuration. Fatal for a run."""


class FetchError(NewsDigestError):
    """A source answered with an unusable response."""


class FeedParseError(NewsDigestError):
    """A retrieved document could not be parsed into items."""


class TranslationError(NewsDigestError):
    """The translation service rejected or failed a request."""


class DeliveryError(NewsDigestError):
    """The digest could not be handed to its destination."""
