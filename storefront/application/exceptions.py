class PipelineError(RuntimeError):
    """Raised when a pipeline call fails (network errors, error responses, bad payloads)."""
    pass
