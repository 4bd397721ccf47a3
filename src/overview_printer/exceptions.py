"""Printer exceptions."""

from __future__ import annotations


class PrinterError(Exception):
    """Base exception for resource printing.

    Attributes:
        message: Human-readable error message.
        resource_type: Kind of resource involved (e.g., "Deployment").
        resource_name: Name of the resource involved.
        namespace: Namespace of the resource (if applicable).
    """

    def __init__(
        self,
        message: str,
        resource_type: str | None = None,
        resource_name: str | None = None,
        namespace: str | None = None,
    ) -> None:
        """Initialize PrinterError.

        Args:
            message: Human-readable error message.
            resource_type: Kind of resource involved.
            resource_name: Name of the resource.
            namespace: Namespace of the resource.
        """
        super().__init__(message)
        self.message = message
        self.resource_type = resource_type
        self.resource_name = resource_name
        self.namespace = namespace

    def __str__(self) -> str:
        """Return string representation of the error."""
        parts = [self.message]
        if self.resource_type and self.resource_name:
            loc = f"[{self.resource_type}/{self.resource_name}"
            if self.namespace:
                loc += f" in {self.namespace}"
            loc += "]"
            parts.append(loc)
        return " ".join(parts)


class InvalidArgumentError(PrinterError):
    """Raised when an input resource or list is missing or malformed.

    Nothing is rendered for the resource; no partial component is returned.
    """


class UpstreamError(PrinterError):
    """Raised when the object store or link resolver fails.

    The original exception is kept on ``original_error`` and chained as
    ``__cause__`` by the raiser.
    """

    def __init__(
        self,
        message: str = "Object store request failed",
        original_error: Exception | None = None,
        status_code: int | None = None,
        resource_type: str | None = None,
        resource_name: str | None = None,
        namespace: str | None = None,
    ) -> None:
        """Initialize UpstreamError.

        Args:
            message: Human-readable error message.
            original_error: The exception raised by the collaborator.
            status_code: HTTP status code when the store talks to an API server.
            resource_type: Kind of resource being queried.
            resource_name: Name of the resource.
            namespace: Namespace of the query.
        """
        super().__init__(
            message=message,
            resource_type=resource_type,
            resource_name=resource_name,
            namespace=namespace,
        )
        self.original_error = original_error
        self.status_code = status_code

    def __str__(self) -> str:
        """Return string representation of the error."""
        text = super().__str__()
        if self.status_code:
            text = f"{text} (status: {self.status_code})"
        return text


class RenderCancelledError(UpstreamError):
    """Raised when the render context was cancelled around a store call."""

    def __init__(self, message: str = "Render cancelled") -> None:
        """Initialize RenderCancelledError.

        Args:
            message: Human-readable error message.
        """
        super().__init__(message=message)


class ConfigurationError(PrinterError):
    """Raised when a configuration summary generator fails.

    Typical cause is a malformed int-or-string value such as ``"25 percent"``.
    """
