from dataclasses import dataclass
from typing import ClassVar

from src.payment.base import GatewayClient, GatewayFactory, GatewayLogger, GatewayProcessor, GatewayValidator


@dataclass(frozen=True)
class MercadoPagoClient(GatewayClient):
    provider: ClassVar[str] = "MercadoPago"


class MercadoPagoValidator(GatewayValidator):
    client_class = MercadoPagoClient
    card_prefix = "5"


class MercadoPagoProcessor(GatewayProcessor):
    client_class = MercadoPagoClient
    id_prefix = "MP"
    amount_label = "R$"


class MercadoPagoLogger(GatewayLogger):
    client_class = MercadoPagoClient


class MercadoPagoPaymentFactory(GatewayFactory):
    client_class = MercadoPagoClient
    validator_class = MercadoPagoValidator
    processor_class = MercadoPagoProcessor
    logger_class = MercadoPagoLogger
