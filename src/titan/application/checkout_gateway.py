"""Port: how the buyer's side reaches the checkout verifier."""

from __future__ import annotations

from abc import ABC, abstractmethod

from titan.application.checkout import CheckoutHandler
from titan.application.dto import CheckoutReceipt, CheckoutRequest


class CheckoutGateway(ABC):

    @abstractmethod
    def submit(self, request: CheckoutRequest) -> CheckoutReceipt:
        """Send *request* to the verifier.

        Raises the same DomainException subclasses as ``CheckoutHandler``.
        """


class LocalCheckoutGateway(CheckoutGateway):
    """Calls the verifier in-process (no network hop)."""

    def __init__(self, handler: CheckoutHandler) -> None:
        self._handler = handler

    def submit(self, request: CheckoutRequest) -> CheckoutReceipt:
        return self._handler.handle(request)
