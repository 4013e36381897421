import os
from typing import Optional, Union

from kinesis_shapes.constants import LOG_LEVELS, TRACE_LOG_LEVELS, TRUE_STRINGS


def eval_log_type(env_var_name: str) -> Union[str, bool]:
    """Get the log type from environment variable"""
    shapes_log = os.environ.get(env_var_name, "").lower().strip()
    return shapes_log if shapes_log in LOG_LEVELS else False


def is_env_true(env_var_name: str) -> bool:
    """Whether the given environment variable has a truthy value."""
    return os.environ.get(env_var_name, "").lower().strip() in TRUE_STRINGS


def parse_api_version(env_var_name: str) -> Optional[str]:
    """
    Returns the botocore API version (e.g., ``2013-12-02``) set in the given environment variable, or None if it
    is unset, which selects the latest version bundled with botocore.
    """
    return os.environ.get(env_var_name, "").strip() or None


def is_trace_logging_enabled() -> bool:
    if SHAPES_LOG:
        return SHAPES_LOG in TRACE_LOG_LEVELS
    return False


# log level, one of LOG_LEVELS
SHAPES_LOG = eval_log_type("SHAPES_LOG")
DEBUG = is_env_true("DEBUG") or SHAPES_LOG in TRACE_LOG_LEVELS

# API version of the kinesis service model used to parse responses
KINESIS_API_VERSION = parse_api_version("KINESIS_API_VERSION")
