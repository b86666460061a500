from utils.get_endpoint import get_endpoint  # type: ignore
from utils.response_utils import Failure, ResponseEnvelope, Success  # type: ignore

__all__ = ["get_endpoint", "Success", "Failure", "ResponseEnvelope"]
