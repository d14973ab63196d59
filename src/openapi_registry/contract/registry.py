"""Attach contracts to handlers without touching the handlers.

Contracts live in identity-keyed side tables: the decorated handler is
returned unchanged and looked up later by reference.
"""

import weakref
from typing import Any, Callable, TypeVar

from .base import ErrorContract, RouteContract

H = TypeVar("H", bound=Callable[..., Any])


class ContractRegistry:
    """Maps handlers (by identity) to their route and error contracts."""

    def __init__(self):
        self._contracts: weakref.WeakKeyDictionary = weakref.WeakKeyDictionary()
        self._error_contracts: weakref.WeakKeyDictionary = weakref.WeakKeyDictionary()

    def with_contract(self, contract: RouteContract | dict) -> Callable[[H], H]:
        """Decorator that records ``contract`` for the decorated handler."""
        if not isinstance(contract, RouteContract):
            contract = RouteContract.model_validate(contract)

        def decorator(handler: H) -> H:
            self._contracts[handler] = contract
            return handler

        return decorator

    def get_contract(self, handler: Any) -> RouteContract | None:
        try:
            return self._contracts.get(handler)
        except TypeError:
            # not weak-referenceable, so it was never registered
            return None

    def with_error_contract(self, contract: ErrorContract | dict) -> Callable[[H], H]:
        if not isinstance(contract, ErrorContract):
            contract = ErrorContract.model_validate(contract)

        def decorator(handler: H) -> H:
            self._error_contracts[handler] = contract
            return handler

        return decorator

    def get_error_contract(self, handler: Any) -> ErrorContract | None:
        try:
            return self._error_contracts.get(handler)
        except TypeError:
            return None


default_registry = ContractRegistry()

with_contract = default_registry.with_contract
get_contract = default_registry.get_contract
with_error_contract = default_registry.with_error_contract
get_error_contract = default_registry.get_error_contract
