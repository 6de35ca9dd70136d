import re
from dataclasses import dataclass
from decimal import Decimal
from typing import ClassVar

import pytest

from src.payment.base import GatewayClient, GatewayFactory, GatewayLogger, GatewayProcessor, GatewayValidator
from src.payment.protocols import PaymentProviderFactory
from src.payment.exceptions import InvalidAmountError, LoggingError, PaymentError, ProcessingError
from src.payment.providers.mercadopago import MercadoPagoClient, MercadoPagoPaymentFactory
from src.payment.providers.stripe import StripeClient, StripePaymentFactory
from src.payment.results import PaymentStatus
from src.payment.service import PaymentService


class RecordingStripeFactory(StripePaymentFactory):
    """Keeps every capability it hands out."""

    def __init__(self, client):
        super().__init__(client)
        self.created = []

    def _keep(self, capability):
        self.created.append(capability)
        return capability

    def create_validator(self):
        return self._keep(super().create_validator())

    def create_processor(self):
        return self._keep(super().create_processor())

    def create_logger(self):
        return self._keep(super().create_logger())


@dataclass(frozen=True)
class AcmeClient(GatewayClient):
    provider: ClassVar[str] = "Acme"


class AcmeValidator(GatewayValidator):
    client_class = AcmeClient
    card_prefix = "9"


class AcmeProcessor(GatewayProcessor):
    client_class = AcmeClient
    id_prefix = "ACME"


class DecliningAcmeProcessor(AcmeProcessor):
    def process_transaction(self, amount, card_number):
        raise ProcessingError("card declined")


class AcmeLogger(GatewayLogger):
    client_class = AcmeClient


class BrokenAcmeLogger(AcmeLogger):
    def log(self, message):
        raise LoggingError("log sink unreachable")


class AcmePaymentFactory(GatewayFactory):
    client_class = AcmeClient
    validator_class = AcmeValidator
    processor_class = AcmeProcessor
    logger_class = AcmeLogger


@pytest.fixture(name="stripe_factory")
def stripe_factory_fixture():
    return RecordingStripeFactory(StripeClient())


def test_stripe_rejects_card_without_prefix(stripe_factory, log_records):
    result = PaymentService(stripe_factory).process_payment(Decimal("150.00"), "1234567890123456")

    assert result.status is PaymentStatus.REJECTED
    assert result.transaction_id is None
    assert result.log_record is None
    # only the validator was ever created
    assert [type(c).__name__ for c in stripe_factory.created] == ["StripeValidator"]
    assert not [r for r in log_records if r["extra"].get("event") in ("payment_process", "payment_log")]


def test_stripe_approves_visa_card(stripe_factory, log_records):
    result = PaymentService(stripe_factory).process_payment(Decimal("150.00"), "4234567890123456")

    assert result.status is PaymentStatus.APPROVED
    assert re.fullmatch(r"STRIPE-.{8}", result.transaction_id)
    assert result.log_record.transaction_id == result.transaction_id
    assert result.log_record.message == f"Transaction processed: {result.transaction_id}"
    assert result.log_record.provider == "Stripe"

    logged = [r for r in log_records if r["extra"].get("event") == "payment_log"]
    assert [r["message"] for r in logged] == [result.log_record.message]
    assert type(stripe_factory.created[-1]).__name__ == "StripeLogger"


def test_mercadopago_approves_mastercard():
    result = PaymentService(MercadoPagoPaymentFactory(MercadoPagoClient())).process_payment(
        Decimal("200.00"), "5234567890123456"
    )
    assert result.is_approved
    assert result.transaction_id.startswith("MP-")
    assert result.provider == "MercadoPago"


def test_every_capability_comes_from_the_same_factory(stripe_factory):
    PaymentService(stripe_factory).process_payment(Decimal("10"), "4234567890123456")

    kinds = [type(c).__name__ for c in stripe_factory.created]
    assert kinds == ["StripeValidator", "StripeProcessor", "StripeLogger"]
    assert all(c.client is stripe_factory.client for c in stripe_factory.created)


def test_amount_is_accepted_as_string_or_int():
    service = PaymentService(StripePaymentFactory(StripeClient()))
    assert service.process_payment("19.90", "4234567890123456").is_approved
    assert service.process_payment(20, "4234567890123456").is_approved


def test_new_family_plugs_in_without_touching_the_service():
    service = PaymentService(AcmePaymentFactory(AcmeClient()))

    assert service.provider == "Acme"
    assert service.process_payment(Decimal("1"), "9234567890123456").transaction_id.startswith("ACME-")
    assert service.process_payment(Decimal("1"), "4234567890123456").status is PaymentStatus.REJECTED


def test_processing_error_fails_without_logging(monkeypatch):
    monkeypatch.setattr(AcmePaymentFactory, "processor_class", DecliningAcmeProcessor)
    factory = AcmePaymentFactory(AcmeClient())

    result = PaymentService(factory).process_payment(Decimal("1"), "9234567890123456")

    assert result.status is PaymentStatus.FAILED
    assert result.reason == "card declined"
    assert result.transaction_id is None
    assert result.log_record is None


def test_logging_error_keeps_the_approval(monkeypatch, log_records):
    monkeypatch.setattr(AcmePaymentFactory, "logger_class", BrokenAcmeLogger)
    factory = AcmePaymentFactory(AcmeClient())

    result = PaymentService(factory).process_payment(Decimal("1"), "9234567890123456")

    assert result.status is PaymentStatus.APPROVED
    assert result.transaction_id.startswith("ACME-")
    assert result.log_record is None
    assert result.log_error == "log sink unreachable"
    assert any(r["level"].name == "WARNING" for r in log_records)


def test_result_serialization():
    result = PaymentService(StripePaymentFactory(StripeClient())).process_payment(Decimal("5"), "4234567890123456")
    data = result.to_dict()
    assert data["status"] == "approved"
    assert data["provider"] == "Stripe"
    assert data["transaction_id"] == result.transaction_id
    assert data["log_record"]["created_at"].endswith("Z")

    rejected = PaymentService(StripePaymentFactory(StripeClient())).process_payment(Decimal("5"), "123")
    assert rejected.to_dict() == {"status": "rejected", "provider": "Stripe", "reason": "invalid card"}


@pytest.mark.parametrize("amount", ["abc", "", "NaN", "Infinity"])
def test_invalid_amount_is_refused_before_validation(stripe_factory, amount):
    with pytest.raises(InvalidAmountError) as exc_info:
        PaymentService(stripe_factory).process_payment(amount, "4234567890123456")

    assert isinstance(exc_info.value, PaymentError)
    assert isinstance(exc_info.value, ValueError)
    assert stripe_factory.created == []


def test_factory_without_provider_cannot_be_built():
    class NamelessFactory(PaymentProviderFactory):
        def create_validator(self):
            return AcmeValidator(AcmeClient())

        def create_processor(self):
            return AcmeProcessor(AcmeClient())

        def create_logger(self):
            return AcmeLogger(AcmeClient())

    with pytest.raises(TypeError):
        NamelessFactory()


def test_gateway_factory_takes_provider_from_its_client():
    factory = AcmePaymentFactory(AcmeClient())
    assert factory.provider == "Acme"
    assert factory.client == AcmeClient()
    with pytest.raises(TypeError):
        AcmePaymentFactory(StripeClient())
