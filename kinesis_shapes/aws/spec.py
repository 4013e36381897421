import logging
from functools import lru_cache

from botocore.loaders import Loader
from botocore.model import OperationModel, ServiceModel

from kinesis_shapes import config
from kinesis_shapes.constants import KINESIS_SERVICE_NAME

LOG = logging.getLogger(__name__)

ServiceName = str

loader = Loader()


@lru_cache()
def load_service(service: ServiceName, version: str = None, model_type="service-2") -> ServiceModel:
    """
    Loads a service model from the data bundled with botocore, for example: load_service("kinesis", "2013-12-02")

    :param service: the name of the service
    :param version: the API version, the latest available one if None
    :param model_type: the type of the model to load
    :return: the service model
    :raises botocore.exceptions.UnknownServiceError: if botocore has no model for the service
    """
    LOG.debug("loading %s model of service %s (version %s)", model_type, service, version or "latest")
    service_description = loader.load_service_model(service, model_type, version)
    return ServiceModel(service_description, service)


def load_kinesis_operation(operation_name: str) -> OperationModel:
    """
    Returns the operation model of the given Kinesis operation, using the API version set in
    ``KINESIS_API_VERSION``.

    :param operation_name: the name of the operation, e.g. ``DescribeStreamSummary``
    :return: the operation model
    :raises botocore.model.OperationNotFoundError: if the service has no such operation
    """
    service = load_service(KINESIS_SERVICE_NAME, config.KINESIS_API_VERSION)
    return service.operation_model(operation_name)
