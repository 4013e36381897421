import dataclasses
import logging
from datetime import datetime
from typing import Any, Dict, Mapping, Optional, Tuple, Type

from kinesis_shapes.aws.api import ServiceException, ValueObject, require

LOG = logging.getLogger(__name__)

ConsumerCountObject = int
KeyId = str
RetentionPeriodHours = int
ShardCountObject = int
StreamARN = str
StreamName = str
Timestamp = datetime


class ShapeEnum(str):
    """
    Base class for the string constants of an API enum. Values which are not listed are still valid on the wire,
    since services add new enum values over time.
    """

    @classmethod
    def values(cls) -> Tuple[str, ...]:
        return tuple(
            value
            for name, value in vars(cls).items()
            if not name.startswith("_") and isinstance(value, str)
        )

    @classmethod
    def exists(cls, value: str) -> bool:
        return value in cls.values()


class EncryptionType(ShapeEnum):
    NONE = "NONE"
    KMS = "KMS"


class MetricsName(ShapeEnum):
    IncomingBytes = "IncomingBytes"
    IncomingRecords = "IncomingRecords"
    OutgoingBytes = "OutgoingBytes"
    OutgoingRecords = "OutgoingRecords"
    WriteProvisionedThroughputExceeded = "WriteProvisionedThroughputExceeded"
    ReadProvisionedThroughputExceeded = "ReadProvisionedThroughputExceeded"
    IteratorAgeMilliseconds = "IteratorAgeMilliseconds"
    ALL = "ALL"


class StreamMode(ShapeEnum):
    PROVISIONED = "PROVISIONED"
    ON_DEMAND = "ON_DEMAND"


class StreamStatus(ShapeEnum):
    CREATING = "CREATING"
    DELETING = "DELETING"
    ACTIVE = "ACTIVE"
    UPDATING = "UPDATING"


class AccessDeniedException(ServiceException):
    code: str = "AccessDeniedException"
    sender_fault: bool = False
    status_code: int = 400


class InvalidArgumentException(ServiceException):
    code: str = "InvalidArgumentException"
    sender_fault: bool = False
    status_code: int = 400


class LimitExceededException(ServiceException):
    code: str = "LimitExceededException"
    sender_fault: bool = False
    status_code: int = 400


class ResourceNotFoundException(ServiceException):
    code: str = "ResourceNotFoundException"
    sender_fault: bool = False
    status_code: int = 400


# errors the DescribeStreamSummary operation is specified to return
DESCRIBE_STREAM_SUMMARY_ERRORS: Dict[str, Type[ServiceException]] = {
    error.code: error
    for error in (
        AccessDeniedException,
        InvalidArgumentException,
        LimitExceededException,
        ResourceNotFoundException,
    )
}


def _log_unknown_enum_value(enum: Type[ShapeEnum], member: str, value: Optional[str]):
    if value is not None and not enum.exists(value):
        LOG.debug("Unknown %s value for member %s: %s", enum.__name__, member, value)


@dataclasses.dataclass(frozen=True)
class StreamModeDetails(ValueObject):
    """
    The capacity mode of a stream, either on-demand or provisioned.
    """

    stream_mode: StreamMode

    @classmethod
    def from_dict(cls, input: Mapping[str, Any]) -> "StreamModeDetails":
        stream_mode = require(input, "StreamMode")
        _log_unknown_enum_value(StreamMode, "StreamMode", stream_mode)
        return cls(stream_mode=stream_mode)


@dataclasses.dataclass(frozen=True)
class EnhancedMetrics(ValueObject):
    """
    The shard-level metrics enabled for a stream. ``ALL`` stands for every metric in ``MetricsName``.
    """

    shard_level_metrics: Optional[Tuple[MetricsName, ...]] = None

    @classmethod
    def from_dict(cls, input: Mapping[str, Any]) -> "EnhancedMetrics":
        shard_level_metrics = input.get("ShardLevelMetrics")
        if shard_level_metrics is not None:
            shard_level_metrics = tuple(shard_level_metrics)
            for metric in shard_level_metrics:
                _log_unknown_enum_value(MetricsName, "ShardLevelMetrics", metric)
        return cls(shard_level_metrics=shard_level_metrics)


@dataclasses.dataclass(frozen=True)
class StreamDescriptionSummary(ValueObject):
    """
    Represents the output of a DescribeStreamSummary operation: the summary of a stream, without its shard list.

    Instances are immutable. Use ``StreamDescriptionSummary.create`` to build one from the deserialized
    ``StreamDescriptionSummary`` member of a response.
    """

    stream_name: StreamName
    stream_arn: StreamARN
    stream_status: StreamStatus
    retention_period_hours: RetentionPeriodHours
    stream_creation_timestamp: Timestamp
    enhanced_monitoring: Tuple[EnhancedMetrics, ...]
    open_shard_count: ShardCountObject
    stream_mode_details: Optional[StreamModeDetails] = None
    encryption_type: Optional[EncryptionType] = None
    # only set if the encryption type is KMS
    key_id: Optional[KeyId] = None
    consumer_count: Optional[ConsumerCountObject] = None

    @classmethod
    def from_dict(cls, input: Mapping[str, Any]) -> "StreamDescriptionSummary":
        """
        Validates the members of the given shape and creates a summary from them. Required members are checked in
        the order they are declared in the service model, the first missing one is reported.

        :param input: the deserialized ``StreamDescriptionSummary`` shape
        :return: a new StreamDescriptionSummary
        :raises MissingRequiredField: if a required member is missing
        """
        stream_name = require(input, "StreamName")
        stream_arn = require(input, "StreamARN")
        stream_status = require(input, "StreamStatus")
        stream_mode_details = input.get("StreamModeDetails")
        if stream_mode_details is not None:
            stream_mode_details = StreamModeDetails.create(stream_mode_details)
        retention_period_hours = require(input, "RetentionPeriodHours")
        stream_creation_timestamp = require(input, "StreamCreationTimestamp")
        enhanced_monitoring = tuple(
            EnhancedMetrics.create(metrics) for metrics in require(input, "EnhancedMonitoring")
        )
        encryption_type = input.get("EncryptionType")
        key_id = input.get("KeyId")
        open_shard_count = require(input, "OpenShardCount")
        consumer_count = input.get("ConsumerCount")

        _log_unknown_enum_value(StreamStatus, "StreamStatus", stream_status)
        _log_unknown_enum_value(EncryptionType, "EncryptionType", encryption_type)

        return cls(
            stream_name=stream_name,
            stream_arn=stream_arn,
            stream_status=stream_status,
            stream_mode_details=stream_mode_details,
            retention_period_hours=retention_period_hours,
            stream_creation_timestamp=stream_creation_timestamp,
            enhanced_monitoring=enhanced_monitoring,
            encryption_type=encryption_type,
            key_id=key_id,
            open_shard_count=open_shard_count,
            consumer_count=consumer_count,
        )


@dataclasses.dataclass(frozen=True)
class DescribeStreamSummaryOutput(ValueObject):
    """
    The result of a DescribeStreamSummary call, wrapping the summary of the described stream.
    """

    stream_description_summary: StreamDescriptionSummary

    @classmethod
    def from_dict(cls, input: Mapping[str, Any]) -> "DescribeStreamSummaryOutput":
        return cls(
            stream_description_summary=StreamDescriptionSummary.create(
                require(input, "StreamDescriptionSummary")
            )
        )
