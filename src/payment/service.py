from decimal import Decimal, InvalidOperation
from typing import Union

from loguru import logger

from src.payment.exceptions import InvalidAmountError, LoggingError, ProcessingError
from src.payment.protocols import PaymentProviderFactory
from src.payment.results import PaymentLogRecord, PaymentResult
from src.security.masking import mask_card


class PaymentService:
    """
    Runs a payment through the capabilities of a single provider factory:
    validate the card, process the transaction, then log it.

    The service never names a gateway. Every capability used in a call comes
    from the one factory given at construction, so families cannot be mixed.
    """

    def __init__(self, factory: PaymentProviderFactory):
        self._factory = factory

    @property
    def provider(self) -> str:
        return self._factory.provider

    def process_payment(self, amount: Union[Decimal, int, str], card_number: str) -> PaymentResult:
        """
        Raises:
            InvalidAmountError: if amount is not a finite decimal number
        """
        try:
            amount = Decimal(str(amount))
        except InvalidOperation:
            raise InvalidAmountError(amount)
        if not amount.is_finite():
            raise InvalidAmountError(amount)
        log = logger.bind(event="payment_service", provider=self.provider)

        validator = self._factory.create_validator()
        if not validator.validate_card(card_number):
            log.warning(f"Card rejected: {mask_card(card_number)}")
            return PaymentResult.rejected(self.provider, "invalid card")

        processor = self._factory.create_processor()
        try:
            transaction_id = processor.process_transaction(amount, card_number)
        except ProcessingError as e:
            log.error(f"Transaction failed: {e}")
            return PaymentResult.failed(self.provider, str(e))

        record = PaymentLogRecord(
            provider=self.provider,
            message=f"Transaction processed: {transaction_id}",
            transaction_id=transaction_id,
        )
        payment_logger = self._factory.create_logger()
        try:
            payment_logger.log(record.message)
        except LoggingError as e:
            # The charge already went through; report and keep the approval
            log.warning(f"Transaction {transaction_id} approved but not logged: {e}")
            return PaymentResult.approved(self.provider, transaction_id, log_error=str(e))

        return PaymentResult.approved(self.provider, transaction_id, log_record=record)
