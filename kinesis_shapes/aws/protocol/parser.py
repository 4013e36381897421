"""
Response parsers that turn raw HTTP responses of Kinesis operations into the typed shapes of
``kinesis_shapes.aws.api.kinesis``.

The wire format is decoded by the botocore parser for the protocol of the service model (``json`` for Kinesis),
which also converts timestamps into ``datetime`` objects. Error responses are raised as the ``ServiceException``
subclass matching their error code.
"""
import logging
from typing import Dict, Mapping, Optional, Type, Union

from botocore.model import OperationModel
from botocore.parsers import create_parser

from kinesis_shapes.aws.api import (
    CommonServiceException,
    MissingRequiredField,
    ServiceException,
    ServiceResponse,
)
from kinesis_shapes.aws.api.kinesis import (
    DESCRIBE_STREAM_SUMMARY_ERRORS,
    DescribeStreamSummaryOutput,
)
from kinesis_shapes.aws.spec import load_kinesis_operation
from kinesis_shapes.constants import ERROR_STATUS_CODE_THRESHOLD

LOG = logging.getLogger(__name__)


class ResponseParser:
    """
    Parses the responses of a single operation.
    """

    operation: OperationModel
    errors: Dict[str, Type[ServiceException]]

    def __init__(
        self, operation: OperationModel, errors: Dict[str, Type[ServiceException]] = None
    ) -> None:
        self.operation = operation
        self.errors = errors or {}
        self._parser = create_parser(operation.service_model.protocol)

    def parse(
        self,
        status_code: int,
        headers: Optional[Mapping[str, str]],
        body: Union[bytes, str],
    ) -> ServiceResponse:
        """
        Decodes the given response into the output shape of the operation.

        :param status_code: the HTTP status code of the response
        :param headers: the HTTP headers of the response
        :param body: the raw response body
        :return: the deserialized output shape, keyed by wire member names
        :raises ServiceException: if the response is an error response
        """
        if isinstance(body, str):
            body = body.encode("utf-8")
        response = {
            "status_code": status_code,
            "headers": {key.lower(): value for key, value in (headers or {}).items()},
            "body": body,
        }

        if status_code >= ERROR_STATUS_CODE_THRESHOLD:
            parsed = self._parser.parse(response, None)
            raise self._create_exception(status_code, parsed.get("Error", {}))

        return self._parser.parse(response, self.operation.output_shape)

    def _create_exception(self, status_code: int, error: Mapping[str, str]) -> ServiceException:
        code = error.get("Code") or ""
        message = error.get("Message") or ""
        LOG.debug(
            "%s returned error %s (status %s): %s", self.operation.name, code, status_code, message
        )

        exception_type = self.errors.get(code)
        if exception_type:
            exception = exception_type(message)
            exception.status_code = status_code
            return exception

        return CommonServiceException(code, message, status_code=status_code)


def parse_describe_stream_summary_response(
    status_code: int,
    headers: Optional[Mapping[str, str]],
    body: Union[bytes, str],
) -> DescribeStreamSummaryOutput:
    """
    Parses the response of a DescribeStreamSummary call.

    :param status_code: the HTTP status code of the response
    :param headers: the HTTP headers of the response
    :param body: the raw JSON response body
    :return: the typed output
    :raises ServiceException: if the response is an error response
    :raises MissingRequiredField: if the response lacks a required member
    """
    parser = ResponseParser(
        load_kinesis_operation("DescribeStreamSummary"), DESCRIBE_STREAM_SUMMARY_ERRORS
    )
    parsed = parser.parse(status_code, headers, body)

    try:
        return DescribeStreamSummaryOutput.create(parsed)
    except MissingRequiredField as e:
        LOG.warning("Malformed DescribeStreamSummary response: %s", e)
        raise
