"""
Exceptions raised by the feed extractor.

Every failure surfaces as one of these classes; nothing is retried or
recovered internally.
"""


class FeedExtractorError(Exception):
    """Base class for all feed extraction failures."""


class InvalidInput(FeedExtractorError):
    """The input given to extract() is not a usable URL."""

    def __init__(self, message: str = "Input param must be a valid URL"):
        super().__init__(message)


class RetrievalError(FeedExtractorError):
    """The remote server answered with a bad status or content type."""

    def __init__(self, message: str, status_code: int = 0, content_type: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.content_type = content_type


class EmptyContent(FeedExtractorError):
    """The retrieved or given body is empty once whitespace is trimmed."""

    def __init__(self, source: str = ""):
        super().__init__(f'Failed to load content from "{source}"')
        self.source = source


class MalformedXml(FeedExtractorError):
    """The XML text is not well-formed."""

    def __init__(self, message: str = "The XML document is not well-formed"):
        super().__init__(message)


class MalformedJson(FeedExtractorError):
    """The JSON text could not be decoded."""

    def __init__(self, message: str = "Failed to convert data to JSON object"):
        super().__init__(message)


class UnrecognizedFormat(FeedExtractorError):
    """The parsed document matches none of the supported feed dialects."""

    def __init__(
        self,
        message: str = "The document is not a supported RSS/RDF/Atom/JSON feed",
    ):
        super().__init__(message)
