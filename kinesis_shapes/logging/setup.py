import logging
import sys
import warnings

from kinesis_shapes import config, constants

LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)-7s --- [%(threadName)s] %(name)s : %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

# levels applied on top of the configured root level, lowest granularity first
default_log_levels = {
    "botocore": logging.ERROR,
    "urllib3": logging.WARNING,
    "kinesis_shapes.aws.spec": logging.INFO,
    "kinesis_shapes.aws.protocol.parser": logging.INFO,
}

trace_log_levels = {
    "kinesis_shapes.aws.spec": logging.DEBUG,
    "kinesis_shapes.aws.protocol.parser": logging.DEBUG,
    "kinesis_shapes.aws.api.kinesis": logging.DEBUG,
}


def get_log_level_from_config() -> int:
    # SHAPES_LOG takes precedence over DEBUG
    if config.SHAPES_LOG:
        log_level = str(config.SHAPES_LOG).upper()
        if log_level.lower() in constants.TRACE_LOG_LEVELS:
            log_level = "DEBUG"
        return logging.getLevelName(log_level)

    return logging.DEBUG if config.DEBUG else logging.INFO


def setup_logging_from_config():
    log_level = get_log_level_from_config()
    setup_logging(log_level)

    if config.is_trace_logging_enabled():
        for name, level in trace_log_levels.items():
            logging.getLogger(name).setLevel(level)


def create_default_handler(log_level: int):
    log_handler = logging.StreamHandler(stream=sys.stderr)
    log_handler.setLevel(log_level)
    log_handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    return log_handler


def setup_logging(log_level=logging.INFO) -> None:
    """
    Configures the python logging environment for kinesis_shapes.

    :param log_level: the optional log level.
    """
    log_handler = create_default_handler(log_level)

    # no-op if the root logger already has handlers
    logging.basicConfig(level=log_level, handlers=[log_handler])

    warnings.filterwarnings("ignore")
    logging.captureWarnings(True)

    logging.root.setLevel(log_level)
    logging.getLogger("kinesis_shapes").setLevel(log_level)
    for logger, level in default_log_levels.items():
        logging.getLogger(logger).setLevel(level)
