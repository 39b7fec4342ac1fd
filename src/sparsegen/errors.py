"""
Error taxonomy for the generators.

Every generator validates its inputs before sampling and raises one of
the exceptions below; no partial graph is returned on failure.
"""


class GraphGenerationError(Exception):
    """Base class for all errors raised by ``sparsegen``."""


class DomainError(GraphGenerationError, ValueError):
    """A numeric parameter lies outside its valid range."""

    def __init__(self, name: str, value, requirement: str):
        self.name = name
        self.value = value
        self.requirement = requirement
        super().__init__(f"{name}={value!r} {requirement}")


class ArgumentError(GraphGenerationError, ValueError):
    """A structural precondition on the inputs does not hold."""


class SMATFormatError(ArgumentError):
    """A matrix file does not follow the SMAT text format."""

    def __init__(self, path, lineno: int, message: str):
        self.path = str(path)
        self.lineno = lineno
        super().__init__(f"{self.path}:{lineno}: {message}")
