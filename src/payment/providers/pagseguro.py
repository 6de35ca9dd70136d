from dataclasses import dataclass
from typing import ClassVar

from src.payment.base import GatewayClient, GatewayFactory, GatewayLogger, GatewayProcessor, GatewayValidator


@dataclass(frozen=True)
class PagSeguroClient(GatewayClient):
    provider: ClassVar[str] = "PagSeguro"


class PagSeguroValidator(GatewayValidator):
    """Any 16-character card number is accepted."""
    client_class = PagSeguroClient


class PagSeguroProcessor(GatewayProcessor):
    client_class = PagSeguroClient
    id_prefix = "PAGSEG"
    amount_label = "R$"


class PagSeguroLogger(GatewayLogger):
    client_class = PagSeguroClient


class PagSeguroPaymentFactory(GatewayFactory):
    client_class = PagSeguroClient
    validator_class = PagSeguroValidator
    processor_class = PagSeguroProcessor
    logger_class = PagSeguroLogger
