"""Exception hierarchy for the resume analysis pipeline.

``ReadError`` is the only one that escapes to callers (from ``extract_text``);
everything else raised inside ``resume_analyzer.analyze`` is absorbed and
replaced with the fallback analysis.
"""


class AnalysisError(Exception):
    """Base class for all pipeline failures."""


class ReadError(AnalysisError):
    """The uploaded file could not be read."""


class InsufficientContentError(AnalysisError):
    """Sanitized text is too short to be worth sending for inference."""


class EndpointError(AnalysisError):
    """The inference endpoint failed or returned an unusable envelope."""


class EndpointStatusError(EndpointError):
    def __init__(self, status_code: int, message: str = "Unknown error"):
        self.status_code = status_code
        self.message = message
        super().__init__(f"API error ({status_code}): {message}")


class EmptyResponseError(EndpointError):
    """Envelope has no generated-content candidates."""


class EndpointTransportError(EndpointError):
    """Network or transport failure talking to the endpoint."""


class ParseError(AnalysisError):
    """No valid JSON object could be recovered from the model reply."""
