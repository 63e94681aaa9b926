"""
Operator error hierarchy.

Every error carries a category, whether kopf should retry, and what the user
can do about it. Admission checks raise ValidationError; reads from the
Contour store raise KubernetesAPIError or PermanentError.
"""

import kopf


class OperatorError(Exception):
    """Base class for Contour operator errors."""

    def __init__(
        self,
        message: str,
        category: str,
        retryable: bool = True,
        delay: int = 30,
        user_action: str | None = None,
        cause: Exception | None = None,
    ):
        """
        Initialize operator error.

        Args:
            message: Human-readable error description
            category: One of validation, permanent, external, configuration
            retryable: Whether kopf should retry the handler
            delay: Retry delay in seconds when retryable
            user_action: How to resolve the error, appended to str()
            cause: Exception this error wraps
        """
        super().__init__(message)
        self.message = message
        self.category = category
        self.retryable = retryable
        self.delay = delay
        self.user_action = user_action
        self.cause = cause

    def as_kopf_error(self):
        """Convert to kopf.TemporaryError or kopf.PermanentError."""
        if self.retryable:
            return kopf.TemporaryError(str(self), delay=self.delay)
        return kopf.PermanentError(str(self))

    def __str__(self) -> str:
        base_msg = super().__str__()
        if self.user_action:
            return f"{base_msg}\nAction required: {self.user_action}"
        return base_msg


class ValidationError(OperatorError):
    """A Contour spec was rejected."""

    def __init__(
        self, message: str, field: str | None = None, user_action: str | None = None
    ):
        if field:
            message = f"Validation error in field '{field}': {message}"
        super().__init__(
            message=message,
            category="validation",
            retryable=False,
            user_action=user_action or "Fix the Contour spec and apply it again",
        )
        self.field = field


class PermanentError(OperatorError):
    """An error that will not go away by retrying."""

    def __init__(
        self,
        message: str,
        user_action: str | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(
            message=message,
            category="permanent",
            retryable=False,
            user_action=user_action or "Manual intervention required to resolve",
            cause=cause,
        )


class ExternalServiceError(OperatorError):
    """A call to a service outside the operator failed."""

    def __init__(
        self,
        service: str,
        message: str,
        retryable: bool = True,
        delay: int = 60,
        user_action: str | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(
            message=f"{service} error: {message}",
            category="external",
            retryable=retryable,
            delay=delay,
            user_action=user_action or f"Check {service} connectivity",
            cause=cause,
        )


class KubernetesAPIError(ExternalServiceError):
    """Listing or reading Contours from the API server failed."""

    def __init__(
        self,
        message: str,
        reason: str | None = None,
        retryable: bool = True,
        cause: Exception | None = None,
    ):
        if reason:
            message = f"{message} (reason: {reason})"

        # RBAC and schema rejections do not resolve on retry
        if reason in {"Forbidden", "Unauthorized", "Invalid"}:
            retryable = False

        super().__init__(
            service="Kubernetes API",
            message=message,
            retryable=retryable,
            user_action="Check the operator can list contours.operator.projectcontour.io",
            cause=cause,
        )


class ConfigurationError(OperatorError):
    """The operator could not be configured, e.g. no kubeconfig."""

    def __init__(
        self, message: str, retryable: bool = False, user_action: str | None = None
    ):
        super().__init__(
            message=message,
            category="configuration",
            retryable=retryable,
            user_action=user_action or "Review the operator environment settings",
        )
