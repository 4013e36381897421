from .core import (
    CommonServiceException,
    MissingRequiredField,
    ServiceException,
    ServiceResponse,
    ValidationError,
    ValueObject,
    require,
)

__all__ = [
    "ServiceException",
    "CommonServiceException",
    "ServiceResponse",
    "ValidationError",
    "MissingRequiredField",
    "ValueObject",
    "require",
]
