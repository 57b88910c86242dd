"""
Error taxonomy shared by the portal API, the forms and the Python client.

Every error carries a single user-facing ``message``; none of them is fatal
and none is retried automatically.
"""


class PortalError(Exception):
    """Base class for errors shown inline to the user"""
    default_message = 'Something went wrong. Please try again.'

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class SubmissionValidationError(PortalError):
    """
    A field failed its format check. The form stays editable.
    """
    default_message = 'Invalid submission.'

    def __init__(self, message=None, field=None):
        super().__init__(message)
        self.field = field

    def __eq__(self, other):
        return (
            isinstance(other, SubmissionValidationError)
            and self.field == other.field
            and self.message == other.message
        )

    def __hash__(self):
        return hash((self.field, self.message))

    def __repr__(self):
        return f"{self.__class__.__name__}(field={self.field!r}, message={self.message!r})"


class FileConstraintError(PortalError):
    """An attachment was refused locally; only that attachment is blocked"""
    default_message = 'File size must be less than 1MB'

    def __init__(self, message=None, field=None, size=None):
        super().__init__(message)
        self.field = field
        self.size = size


class TransportError(PortalError):
    """
    The endpoint answered with an error, or the request never completed.

    ``status_code`` is None when the transport itself failed.
    """
    default_message = 'An error occurred. Please try again.'

    def __init__(self, message=None, status_code=None):
        super().__init__(message)
        self.status_code = status_code


class WorkflowError(PortalError):
    """A review action was refused because its precondition does not hold"""
    default_message = 'This action is not allowed in the current state.'
