from typing import Any, Mapping, Type, TypeVar, Union

ServiceResponse = Mapping[str, Any]

V = TypeVar("V", bound="ValueObject")


class ServiceException(Exception):
    """
    An exception that indicates that a service returned an error response.
    Do not use this exception directly (use the generated subclasses or CommonServiceException instead).
    """

    code: str = "ServiceException"
    sender_fault: bool = False
    status_code: int = 400

    def __init__(self, message: str = None):
        self.message = message
        super().__init__(message)


class CommonServiceException(ServiceException):
    """
    An exception for error responses with a code that is not part of the service model, f.e. the "Common
    Errors" of the AWS API references:
    https://docs.aws.amazon.com/kinesis/latest/APIReference/CommonErrors.html
    """

    def __init__(self, code: str, message: str, status_code: int = 400, sender_fault: bool = False):
        self.code = code
        self.status_code = status_code
        self.sender_fault = sender_fault
        super().__init__(message)


class ValidationError(ValueError):
    """Raised when a response shape does not match its service model."""


class MissingRequiredField(ValidationError):
    """
    Raised when constructing a value object from a mapping that lacks one of the required members.

    :param field: the wire name of the missing member, e.g. ``StreamName``
    """

    field: str

    def __init__(self, field: str):
        self.field = field
        super().__init__(f'Missing required field "{field}".')


def require(input: Mapping[str, Any], field: str) -> Any:
    """
    Returns the value of the given member, or raises a ``MissingRequiredField`` if it is not set.

    :param input: the deserialized shape
    :param field: the wire name of the member
    :return: the value of the member
    :raises MissingRequiredField: if the member is absent or None
    """
    value = input.get(field)
    if value is None:
        raise MissingRequiredField(field)
    return value


class ValueObject:
    """
    Base class for immutable shapes that are built from deserialized API responses.
    Subclasses implement ``from_dict``, which validates the required members.
    """

    @classmethod
    def from_dict(cls: Type[V], input: Mapping[str, Any]) -> V:
        raise NotImplementedError

    @classmethod
    def create(cls: Type[V], input: Union[V, Mapping[str, Any]]) -> V:
        """
        Creates a new instance from a deserialized shape, or returns the given instance if it already is one.

        :param input: a mapping of wire member names to values, or an instance of this class
        :return: an instance of this class
        :raises MissingRequiredField: if the mapping lacks a required member
        """
        if isinstance(input, cls):
            return input
        return cls.from_dict(input)
