"""Custom exceptions for the notion-transcriber service."""


class ConfigurationError(Exception):
    """Raised at startup when required settings are missing."""

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(
            f"Missing required environment variables: {', '.join(missing)}"
        )


class TransportError(Exception):
    """Raised when a provider cannot be reached."""

    def __init__(self, provider: str, cause: Exception | None = None):
        self.provider = provider
        self.cause = cause
        super().__init__(f"Request to {provider} failed: {cause}")


class ProviderError(Exception):
    """Raised when a provider answers with a non-success status."""

    def __init__(self, provider: str, message: str, status_code: int | None = None):
        self.provider = provider
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class MalformedResponseError(Exception):
    """Raised when a provider response does not have the expected structure."""

    def __init__(self, provider: str, reason: str, cause: Exception | None = None):
        self.provider = provider
        self.reason = reason
        self.cause = cause
        super().__init__(f"Malformed response from {provider}: {reason}")


class InvalidUploadError(Exception):
    """Raised when a submitted upload fails boundary validation."""

    def __init__(self, field: str, reason: str, status_code: int = 422):
        self.field = field
        self.reason = reason
        self.status_code = status_code
        super().__init__(f"Invalid '{field}': {reason}")


class FixtureReadError(Exception):
    """Raised when an offline fixture file cannot be read."""

    def __init__(self, path: str, cause: Exception | None = None):
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to read fixture '{path}'")


class StorageDownloadError(Exception):
    """Raised when downloading a file from storage fails."""

    def __init__(self, object_name: str, cause: Exception | None = None):
        self.object_name = object_name
        self.cause = cause
        super().__init__(f"Failed to download '{object_name}' from storage")


class StorageUploadError(Exception):
    """Raised when uploading a file to storage fails."""

    def __init__(self, object_name: str, cause: Exception | None = None):
        self.object_name = object_name
        self.cause = cause
        super().__init__(f"Failed to upload '{object_name}' to storage")


class PipelineStageError(Exception):
    """Raised when a pipeline stage fails; wraps the stage's own error."""

    def __init__(self, stage: str, cause: Exception):
        self.stage = stage
        self.cause = cause
        super().__init__(f"Pipeline stage '{stage}' failed: {cause}")
