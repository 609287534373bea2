"""
Exception hierarchy for the requirement-to-test-case pipeline.

Missing or unrecognisable document content is never an error: the
extractor degrades to empty sequences. Only decoding failures and invalid
generation options are raised to callers.
"""


class Req2TestError(Exception):
    """Base class for all pipeline errors."""


class DecodeError(Req2TestError):
    """A document decoder could not turn a file into text."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to decode {path}: {reason}")


class DocumentParseError(Req2TestError):
    """Raised by parse_document when a document cannot be read."""


class UnsupportedFormatError(DocumentParseError):
    """The document extension has no registered decoder."""

    def __init__(self, extension: str, supported):
        self.extension = extension
        self.supported = list(supported)
        super().__init__(
            f"Unsupported document format: {extension or '<none>'} "
            f"(supported: {', '.join(self.supported)})"
        )


class GenerationError(Req2TestError):
    """Test case synthesis could not start."""


class OptionsValidationError(GenerationError):
    """A generation option has the wrong shape or value."""

    def __init__(self, field_name: str, value, expected: str):
        self.field_name = field_name
        self.value = value
        self.expected = expected
        super().__init__(
            f"Invalid generation option '{field_name}': expected {expected}, "
            f"got {value!r}"
        )
