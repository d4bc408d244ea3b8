# src/services/errors.py

class UpstreamError(Exception):
    """An upstream data or LLM API answered with a non-2xx status."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
