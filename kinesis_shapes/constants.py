import os

# strings to indicate truthy values
TRUE_STRINGS = ("1", "true", "True")
# strings with valid log levels for SHAPES_LOG
LOG_LEVELS = ("trace", "debug", "info", "warn", "error", "warning")

# trace log level, configurable via $SHAPES_LOG
SHAPES_LOG_TRACE = "trace"
TRACE_LOG_LEVELS = [SHAPES_LOG_TRACE]

# name of the service model in botocore's bundled data
KINESIS_SERVICE_NAME = "kinesis"

# responses with a status code at or above this one carry an error document (same as botocore)
ERROR_STATUS_CODE_THRESHOLD = 301

# Credentials used in the test suite
TEST_AWS_ACCOUNT_ID = os.getenv("TEST_AWS_ACCOUNT_ID") or "000000000000"
TEST_AWS_REGION_NAME = os.getenv("TEST_AWS_REGION") or "us-east-1"
