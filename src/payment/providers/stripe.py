from dataclasses import dataclass
from typing import ClassVar

from src.payment.base import GatewayClient, GatewayFactory, GatewayLogger, GatewayProcessor, GatewayValidator


@dataclass(frozen=True)
class StripeClient(GatewayClient):
    provider: ClassVar[str] = "Stripe"


class StripeValidator(GatewayValidator):
    client_class = StripeClient
    card_prefix = "4"


class StripeProcessor(GatewayProcessor):
    client_class = StripeClient
    id_prefix = "STRIPE"


class StripeLogger(GatewayLogger):
    client_class = StripeClient


class StripePaymentFactory(GatewayFactory):
    client_class = StripeClient
    validator_class = StripeValidator
    processor_class = StripeProcessor
    logger_class = StripeLogger
