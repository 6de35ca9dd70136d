class PaymentError(Exception):
    """Base class for payment errors."""


class UnsupportedProviderError(PaymentError, ValueError):
    def __init__(self, provider: str, available=None):
        self.provider = provider
        self.available = list(available or [])
        message = f"Unsupported provider: {provider}"
        if self.available:
            message += f" (available: {', '.join(self.available)})"
        super().__init__(message)


class ProcessingError(PaymentError):
    """Raised by a processor when the gateway fails or declines the charge."""


class LoggingError(PaymentError):
    """Raised by a logger when a log entry could not be delivered."""


class InvalidAmountError(PaymentError, ValueError):
    def __init__(self, amount):
        self.amount = amount
        super().__init__(f"Invalid amount: {amount!r}")
