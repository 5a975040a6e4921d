"""Exception taxonomy. Every error is fatal to a run."""


class OpenSearchError(Exception):
    """Base class for everything the pipeline raises on purpose."""


class FetchError(OpenSearchError):
    """Raised when a page or descriptor cannot be retrieved."""


class DescriptorLinkNotFoundError(OpenSearchError):
    """Raised when the HTML page carries no OpenSearch ``<link>``."""


class MissingAttributeError(DescriptorLinkNotFoundError):
    """Raised when the OpenSearch ``<link>`` has no ``href``."""


class InvalidDescriptorLinkError(OpenSearchError):
    """Raised when the ``href`` cannot be resolved against the page URL."""


class MalformedDescriptorError(OpenSearchError):
    """Raised when the descriptor XML is not well-formed or has the wrong shape."""


class DuplicateFieldError(OpenSearchError):
    """Raised when a single-valued descriptor field appears twice."""

    def __init__(self, field_name: str):
        super().__init__(f"multiple {field_name} values were provided")
        self.field_name = field_name


class NoUrlsDefinedError(OpenSearchError):
    """Raised when a descriptor defines no search URL."""

    def __init__(self, message: str = "OpenSearch requires at least one defined URL; none were found"):
        super().__init__(message)
