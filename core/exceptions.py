"""
Custom exceptions for the application.
"""


class BaseApplicationException(Exception):
    """Base exception for all application-specific exceptions"""
    default_message = "An application error occurred"

    def __init__(self, message=None, code=None, details=None):
        self.message = message or self.default_message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(BaseApplicationException):
    """Raised when validation fails"""
    default_message = "Validation failed"


class SchemaError(BaseApplicationException):
    """Raised when the edit history table cannot be created or repaired"""
    default_message = "Edit history schema could not be installed"

    def __init__(self, table=None, **kwargs):
        self.table = table
        super().__init__(**kwargs)
