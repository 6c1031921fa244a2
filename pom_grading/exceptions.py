"""
Exceptions raised by the size grading engine.
"""


class GradingError(Exception):
    """
    Base class for size grading errors.
    """


class InvalidBaseSizeError(GradingError, ValueError):
    """
    Raised when a chart is requested for a base size the size system does not contain.
    """

    def __init__(self, base_size: str, system_key: str):
        self.base_size = base_size
        self.system_key = system_key
        super().__init__(f"Base size {base_size} not found in {system_key} system")


class UnknownSizeSystemError(GradingError, KeyError):
    """
    Raised when a size system key is not configured.
    """

    def __init__(self, system_key: str):
        self.system_key = system_key
        super().__init__(system_key)

    def __str__(self) -> str:
        return f"Unknown size system: {self.system_key}"
