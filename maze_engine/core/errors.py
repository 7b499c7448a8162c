class MazeError(Exception):
    """Base class for all maze engine errors."""


class InvalidDimension(MazeError, ValueError):
    def __init__(self, size):
        super().__init__(f"Grid size must be a positive integer, got {size!r}")
        self.size = size


class GeneratorStateError(MazeError, RuntimeError):
    """Raised when generator operations are called out of sequence."""


class NotStarted(GeneratorStateError):
    def __init__(self, operation: str):
        super().__init__(f"{operation}() called before start()")
        self.operation = operation


class AlreadyStarted(GeneratorStateError):
    def __init__(self):
        super().__init__("start() called twice without an intervening reset()")
