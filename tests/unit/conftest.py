from datetime import datetime, timezone

import pytest

from kinesis_shapes.constants import TEST_AWS_ACCOUNT_ID, TEST_AWS_REGION_NAME

STREAM_CREATION_TIMESTAMP = datetime(2023, 1, 1, tzinfo=timezone.utc)


def kinesis_stream_arn(stream_name: str) -> str:
    return f"arn:aws:kinesis:{TEST_AWS_REGION_NAME}:{TEST_AWS_ACCOUNT_ID}:stream/{stream_name}"


@pytest.fixture
def summary_input():
    """
    A deserialized StreamDescriptionSummary shape which only contains the required members.
    """
    return {
        "StreamName": "s1",
        "StreamARN": kinesis_stream_arn("s1"),
        "StreamStatus": "ACTIVE",
        "RetentionPeriodHours": 24,
        "StreamCreationTimestamp": STREAM_CREATION_TIMESTAMP,
        "EnhancedMonitoring": [],
        "OpenShardCount": 4,
    }


@pytest.fixture
def full_summary_input(summary_input):
    return {
        **summary_input,
        "StreamModeDetails": {"StreamMode": "PROVISIONED"},
        "EnhancedMonitoring": [
            {"ShardLevelMetrics": ["IncomingBytes", "OutgoingBytes"]},
            {"ShardLevelMetrics": []},
            {},
        ],
        "EncryptionType": "KMS",
        "KeyId": "alias/aws/kinesis",
        "ConsumerCount": 2,
    }
