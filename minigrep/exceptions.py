"""Custom exceptions for minigrep."""


class MinigrepError(Exception):
    """Base exception for minigrep errors."""
    pass


class ConfigurationError(MinigrepError):
    """Error in configuration."""
    pass


class InsufficientArgumentsError(ConfigurationError):
    """Fewer than two arguments after the program name."""

    def __init__(self, message: str = "Not enough arguments. USAGE is: minigrep <query> <filename>"):
        super().__init__(message)


class FileReadError(MinigrepError):
    """Error reading the file to search."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Could not read {path}: {reason}")
        self.path = path
        self.reason = reason
