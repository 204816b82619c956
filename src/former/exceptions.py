"""Exceptions raised while building forms."""


class FormerError(Exception):
    """Base class for former errors."""


class InvalidFrameworkException(FormerError, RuntimeError):
    """Raised when a framework strategy cannot be resolved."""

    def __init__(self, framework: str | None = None):
        self.framework = None
        super().__init__("Framework was not found")
        if framework is not None:
            self.set_framework(framework)

    def set_framework(self, framework: str) -> "InvalidFrameworkException":
        """Record the missing framework and rebuild the message."""
        self.framework = framework
        self.args = (f"Framework was not found [{framework}]",)
        return self


class UnsupportedFrameworkOperation(FormerError, AttributeError):
    """Raised when a framework-reserved method is called on a framework lacking it."""

    def __init__(self, operation: str, framework: str, message: str | None = None):
        self.operation = operation
        self.framework = framework
        super().__init__(message or f"{operation} is not available on the {framework} framework")
