from abc import ABC, abstractmethod
from decimal import Decimal
from enum import Enum


class ProviderFamily(str, Enum):
    PAGSEGURO = "PagSeguro"
    MERCADOPAGO = "MercadoPago"
    STRIPE = "Stripe"


class PaymentValidator(ABC):
    @abstractmethod
    def validate_card(self, card_number: str) -> bool:
        pass


class PaymentProcessor(ABC):
    @abstractmethod
    def process_transaction(self, amount: Decimal, card_number: str) -> str:
        """Charge the card and return the gateway transaction id."""
        pass


class PaymentLogger(ABC):
    @abstractmethod
    def log(self, message: str) -> None:
        pass


class PaymentProviderFactory(ABC):
    """
    Builds the capabilities of a single gateway family.
    Every capability returned by one factory shares the factory's client.
    """

    @property
    @abstractmethod
    def provider(self) -> str:
        """Name of the gateway family this factory builds for."""
        pass

    @abstractmethod
    def create_validator(self) -> PaymentValidator:
        pass

    @abstractmethod
    def create_processor(self) -> PaymentProcessor:
        pass

    @abstractmethod
    def create_logger(self) -> PaymentLogger:
        pass
