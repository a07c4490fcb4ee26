"""Error taxonomy for ftsbench.

Three families of failure, each with its own blast radius:

- ConfigurationError: the benchmark spec or a suite is malformed. Raised eagerly,
  before any backend is queried, and aborts the whole run.
- ResolutionError: one engine's query text for one query cannot be produced.
  Recorded on that single QueryResult.
- ExecutionError: a backend call failed. Recorded on that single QueryResult
  once every measured run has failed.
"""


class FtsBenchError(Exception):
    """Base exception for all ftsbench errors."""

    pass


# -----------------------------------------------------------------------------
# Configuration
# -----------------------------------------------------------------------------


class ConfigurationError(FtsBenchError):
    """Raised when a spec or suite is malformed or incomplete."""

    pass


class InvalidTemplateError(ConfigurationError):
    """Raised when a query template has no id or no pattern."""

    pass


class TemplateNameCollisionError(ConfigurationError):
    """Raised when two templates share the same id."""

    def __init__(self, template_id: str) -> None:
        self.template_id = template_id
        super().__init__(f"Template already registered: '{template_id}'")


class ExecutorNotFoundError(ConfigurationError):
    """Raised when a job names executors that were never constructed."""

    def __init__(self, names: list[str]) -> None:
        self.names = names
        super().__init__(f"Executor not found: {', '.join(names)}")


# -----------------------------------------------------------------------------
# Resolution
# -----------------------------------------------------------------------------


class ResolutionError(FtsBenchError):
    """Raised when an engine's query text cannot be resolved."""

    pass


class TemplateNotFoundError(ResolutionError):
    """Raised when a query references an unknown template."""

    def __init__(self, template_id: str) -> None:
        self.template_id = template_id
        super().__init__(f"Template not found: '{template_id}'")


class MissingTemplateParamsError(ResolutionError):
    """Raised when rendering leaves placeholders without a value.

    Lists every missing parameter, not just the first one.
    """

    def __init__(self, template_id: str, missing: list[str]) -> None:
        self.template_id = template_id
        self.missing = missing
        super().__init__(
            f"Template '{template_id}' missing params: {', '.join(missing)}"
        )


# -----------------------------------------------------------------------------
# Execution
# -----------------------------------------------------------------------------


class ExecutionError(FtsBenchError):
    """Raised when a backend call fails (including timeouts)."""

    def __init__(self, engine: str, message: str) -> None:
        self.engine = engine
        super().__init__(f"{engine}: {message}")
