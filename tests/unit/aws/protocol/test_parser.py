import json
from datetime import datetime, timezone

import pytest

from kinesis_shapes.aws.api import CommonServiceException, MissingRequiredField
from kinesis_shapes.aws.api.kinesis import (
    DESCRIBE_STREAM_SUMMARY_ERRORS,
    LimitExceededException,
    ResourceNotFoundException,
    StreamDescriptionSummary,
    StreamMode,
)
from kinesis_shapes.aws.protocol.parser import (
    ResponseParser,
    parse_describe_stream_summary_response,
)
from kinesis_shapes.aws.spec import load_kinesis_operation

STREAM_CREATION_EPOCH = 1672531200.0

HEADERS = {
    "Content-Type": "application/x-amz-json-1.1",
    "x-amzn-RequestId": "c0ffee00-0000-4000-8000-000000000000",
}


@pytest.fixture
def response_summary(summary_input):
    """The StreamDescriptionSummary member as it is sent on the wire."""
    return {**summary_input, "StreamCreationTimestamp": STREAM_CREATION_EPOCH}


def _body(document: dict) -> bytes:
    return json.dumps(document).encode("utf-8")


class TestDescribeStreamSummaryResponse:
    def test_parse_success(self, response_summary):
        response_summary["StreamModeDetails"] = {"StreamMode": "ON_DEMAND"}
        response_summary["EnhancedMonitoring"] = [{"ShardLevelMetrics": ["ALL"]}]
        response_summary["ConsumerCount"] = 1

        output = parse_describe_stream_summary_response(
            200, HEADERS, _body({"StreamDescriptionSummary": response_summary})
        )

        summary = output.stream_description_summary
        assert isinstance(summary, StreamDescriptionSummary)
        assert summary.stream_name == "s1"
        assert summary.open_shard_count == 4
        assert summary.consumer_count == 1
        assert summary.encryption_type is None
        assert summary.stream_mode_details.stream_mode == StreamMode.ON_DEMAND
        assert summary.enhanced_monitoring[0].shard_level_metrics == ("ALL",)
        assert summary.stream_creation_timestamp == datetime(2023, 1, 1, tzinfo=timezone.utc)

    def test_parse_string_body(self, response_summary):
        output = parse_describe_stream_summary_response(
            200, None, json.dumps({"StreamDescriptionSummary": response_summary})
        )

        assert output.stream_description_summary.retention_period_hours == 24

    def test_parse_missing_member(self, response_summary, caplog):
        del response_summary["OpenShardCount"]

        with pytest.raises(MissingRequiredField) as e:
            parse_describe_stream_summary_response(
                200, HEADERS, _body({"StreamDescriptionSummary": response_summary})
            )

        assert e.value.field == "OpenShardCount"
        assert "Malformed DescribeStreamSummary response" in caplog.text

    def test_parse_empty_document(self):
        with pytest.raises(MissingRequiredField) as e:
            parse_describe_stream_summary_response(200, HEADERS, b"{}")

        assert e.value.field == "StreamDescriptionSummary"

    def test_parse_modeled_error(self):
        body = _body(
            {
                "__type": "ResourceNotFoundException",
                "message": "Stream s1 under account 000000000000 not found.",
            }
        )

        with pytest.raises(ResourceNotFoundException) as e:
            parse_describe_stream_summary_response(400, HEADERS, body)

        assert e.value.code == "ResourceNotFoundException"
        assert e.value.message == "Stream s1 under account 000000000000 not found."
        assert e.value.status_code == 400

    def test_parse_error_with_namespaced_type(self):
        body = _body(
            {
                "__type": "com.amazonaws.kinesis.v20131202#LimitExceededException",
                "message": "Rate exceeded for stream s1 under account 000000000000.",
            }
        )

        with pytest.raises(LimitExceededException):
            parse_describe_stream_summary_response(400, HEADERS, body)

    def test_parse_unknown_error(self):
        body = _body({"__type": "ThrottlingException", "message": "Rate exceeded"})

        with pytest.raises(CommonServiceException) as e:
            parse_describe_stream_summary_response(400, HEADERS, body)

        assert e.value.code == "ThrottlingException"
        assert e.value.message == "Rate exceeded"
        assert e.value.status_code == 400

    def test_parse_generic_server_error(self):
        with pytest.raises(CommonServiceException) as e:
            parse_describe_stream_summary_response(500, {}, b"")

        assert e.value.code == "500"
        assert e.value.status_code == 500


class TestResponseParser:
    def test_parse_returns_wire_shape(self, response_summary):
        parser = ResponseParser(
            load_kinesis_operation("DescribeStreamSummary"), DESCRIBE_STREAM_SUMMARY_ERRORS
        )

        parsed = parser.parse(200, HEADERS, _body({"StreamDescriptionSummary": response_summary}))

        assert parsed["StreamDescriptionSummary"]["StreamName"] == "s1"
        assert isinstance(parsed["StreamDescriptionSummary"]["StreamCreationTimestamp"], datetime)

    def test_parse_without_modeled_errors(self):
        parser = ResponseParser(load_kinesis_operation("DescribeStreamSummary"))

        with pytest.raises(CommonServiceException) as e:
            parser.parse(400, HEADERS, _body({"__type": "ResourceNotFoundException"}))

        assert e.value.code == "ResourceNotFoundException"
