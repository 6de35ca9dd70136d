import uuid
from dataclasses import dataclass
from decimal import Decimal
from typing import ClassVar, Optional, Type

from loguru import logger

from src.payment.protocols import PaymentLogger, PaymentProcessor, PaymentProviderFactory, PaymentValidator
from src.security.masking import mask_card


@dataclass(frozen=True)
class GatewayClient:
    """
    Opaque per-gateway handle. Holds the credentials a real HTTP client would use;
    no network calls are made through it yet.
    """
    provider: ClassVar[str] = ""
    api_key: Optional[str] = None


class ClientBound:
    client_class: ClassVar[Type[GatewayClient]] = GatewayClient

    def __init__(self, client: GatewayClient):
        if not isinstance(client, self.client_class):
            raise TypeError(
                f"{type(self).__name__} requires a {self.client_class.__name__}, got {type(client).__name__}"
            )
        self.client = client

    @property
    def provider(self) -> str:
        return self.client.provider


class GatewayValidator(ClientBound, PaymentValidator):
    card_length: ClassVar[int] = 16
    card_prefix: ClassVar[str] = ""

    def validate_card(self, card_number: str) -> bool:
        logger.bind(event="payment_validate", provider=self.provider).info(
            f"Validating card {mask_card(card_number)}"
        )
        if not isinstance(card_number, str):
            return False
        return len(card_number) == self.card_length and card_number.startswith(self.card_prefix)


class GatewayProcessor(ClientBound, PaymentProcessor):
    id_prefix: ClassVar[str] = ""
    amount_label: ClassVar[str] = "$"

    def process_transaction(self, amount: Decimal, card_number: str) -> str:
        logger.bind(event="payment_process", provider=self.provider).info(
            f"Processing {self.amount_label} {amount} for card {mask_card(card_number)}"
        )
        return self.new_transaction_id()

    def new_transaction_id(self) -> str:
        return f"{self.id_prefix}-{uuid.uuid4().hex[:8]}"


class GatewayLogger(ClientBound, PaymentLogger):
    def log(self, message: str) -> None:
        # A remote log sink would be reached through self.client
        logger.bind(event="payment_log", provider=self.provider).info(message)


class GatewayFactory(ClientBound, PaymentProviderFactory):
    validator_class: ClassVar[Type[GatewayValidator]] = GatewayValidator
    processor_class: ClassVar[Type[GatewayProcessor]] = GatewayProcessor
    logger_class: ClassVar[Type[GatewayLogger]] = GatewayLogger

    def create_validator(self) -> GatewayValidator:
        return self.validator_class(self.client)

    def create_processor(self) -> GatewayProcessor:
        return self.processor_class(self.client)

    def create_logger(self) -> GatewayLogger:
        return self.logger_class(self.client)
