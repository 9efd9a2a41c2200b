"""
Exception hierarchy for the CGI RAG pipeline.
"""


class CGIRagError(Exception):
    """Base class for all pipeline errors."""


class ConfigurationError(CGIRagError):
    """Raised when static tables or settings are unusable."""


class UnknownEditionError(ConfigurationError):
    """Raised when a CGI edition is not supported."""

    def __init__(self, edition: str, supported: tuple):
        super().__init__(
            f"Unknown CGI edition '{edition}'. Supported: {', '.join(supported)}"
        )
        self.edition = edition
        self.supported = supported


class RetrievalError(CGIRagError):
    """Raised by retrieval backends (vector store, embeddings)."""


class GenerationError(CGIRagError):
    """Raised when the LLM provider fails to produce an answer."""

    def __init__(self, message: str, model: str = ""):
        super().__init__(message)
        self.model = model
