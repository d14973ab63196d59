from .base import DescribedResponse, ErrorContract, RequestContract, ResponseContract, RouteContract
from .registry import (
    ContractRegistry,
    default_registry,
    get_contract,
    get_error_contract,
    with_contract,
    with_error_contract,
)

__all__ = [
    "ContractRegistry",
    "DescribedResponse",
    "ErrorContract",
    "RequestContract",
    "ResponseContract",
    "RouteContract",
    "default_registry",
    "get_contract",
    "get_error_contract",
    "with_contract",
    "with_error_contract",
]
