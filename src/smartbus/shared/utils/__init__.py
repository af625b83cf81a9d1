from .logger import get_logger as get_logger
from .responses import ErrorResponse as ErrorResponse
from .responses import error_response as error_response
from .responses import validation_error_response as validation_error_response
