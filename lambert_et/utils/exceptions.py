"""
Custom exceptions for the Lambert-W ET estimator.

Provides a hierarchical exception system so callers can catch
input problems and numerical problems separately.
"""


class LambertETError(Exception):
    """
    Base exception for lambert_et errors.

    All custom exceptions inherit from this class.
    Provides context information about the error location and details.
    """

    def __init__(self, message: str, details: dict = None, *args):
        super().__init__(message, *args)
        self.message = message
        self.details = details or {}

    def __str__(self):
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message

    def add_detail(self, key: str, value) -> None:
        """
        Add detail information to the exception.

        Args:
            key: Detail key
            value: Detail value
        """
        self.details[key] = value


class DataInputError(LambertETError):
    """
    Exception raised for invalid input data.

    This includes:
    - Non-numeric inputs
    - Batch inputs whose shapes cannot be combined
    """

    def __init__(self, message: str, input_name: str = None, details: dict = None, *args):
        details = dict(details or {})
        if input_name:
            details["input"] = input_name
        super().__init__(message, details, *args)


class InputShapeMismatchError(DataInputError):
    """
    Exception raised when batch-valued arguments differ in shape.
    """

    def __init__(self, message: str, shapes: dict = None, *args):
        details = {}
        if shapes:
            details["shapes"] = shapes
        super().__init__(message, details=details, *args)


class ComputationError(LambertETError):
    """
    Exception raised for numerical errors in the ET computation.

    This includes:
    - Lambert W arguments outside the real principal branch
    - Divisions by zero from degenerate conductances or temperatures
    """

    def __init__(self, message: str, computation_step: str = None, details: dict = None, *args):
        details = dict(details or {})
        if computation_step:
            details["step"] = computation_step
        super().__init__(message, details, *args)


class DomainInputError(ComputationError):
    """
    Exception raised when an input has no real principal-branch solution.

    Raised for Lambert W arguments z < -1/e and for zero air temperature.
    """

    def __init__(self, message: str, count: int = None, min_value: float = None, *args):
        details = {}
        if count is not None:
            details["count"] = count
        if min_value is not None:
            details["min_value"] = min_value
        super().__init__(message, computation_step="lambertw", details=details, *args)


class DegenerateConductanceError(ComputationError):
    """
    Exception raised when a conductance sum is zero.
    """

    def __init__(self, message: str, term: str = None, count: int = None, *args):
        details = {}
        if term:
            details["term"] = term
        if count is not None:
            details["count"] = count
        super().__init__(message, computation_step="conductances", details=details, *args)


def create_error_context(error: Exception, context: dict) -> dict:
    """
    Create a comprehensive error context dictionary.

    Args:
        error: The exception that occurred
        context: Additional context information

    Returns:
        Dictionary with error details
    """
    context_data = {
        "error_type": type(error).__name__,
        "error_message": str(error),
    }

    if hasattr(error, 'details'):
        context_data["error_details"] = error.details

    if context:
        context_data["additional_context"] = context

    return context_data
