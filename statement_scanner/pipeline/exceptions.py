class PipelineError(Exception):
    """Base exception for all pipeline-related errors."""


class RunInProgressError(PipelineError):
    """Raised when a run is started while another is still processing."""


class AggregateRunError(PipelineError):
    """Raised when any document of a run fails.

    The message is the first failure's message, or a generic one when that
    failure carries none; every collected failure is kept in ``errors``.
    """

    DEFAULT_MESSAGE = (
        "Failed to analyze one or more documents. "
        "Please check the files and try again."
    )

    def __init__(self, errors: list[BaseException]) -> None:
        super().__init__(str(errors[0]) or self.DEFAULT_MESSAGE)
        self.errors = errors
