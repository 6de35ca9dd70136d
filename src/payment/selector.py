"""
Maps a gateway name to a ready-to-use provider factory.

This table is the only place gateway names are spelled out; consumers receive a
PaymentProviderFactory and never learn which family they are talking to.
"""
from typing import Callable, Dict, List, Optional, Union

from loguru import logger

from src.config import Settings, get_settings
from src.payment.exceptions import UnsupportedProviderError
from src.payment.protocols import PaymentProviderFactory, ProviderFamily
from src.payment.providers.mercadopago import MercadoPagoClient, MercadoPagoPaymentFactory
from src.payment.providers.pagseguro import PagSeguroClient, PagSeguroPaymentFactory
from src.payment.providers.stripe import StripeClient, StripePaymentFactory

FactoryBuilder = Callable[[Settings], PaymentProviderFactory]

PROVIDERS: Dict[str, FactoryBuilder] = {
    ProviderFamily.STRIPE.value: lambda s: StripePaymentFactory(StripeClient(api_key=s.stripe_api_key)),
    ProviderFamily.PAGSEGURO.value: lambda s: PagSeguroPaymentFactory(PagSeguroClient(api_key=s.pagseguro_api_key)),
    ProviderFamily.MERCADOPAGO.value: lambda s: MercadoPagoPaymentFactory(
        MercadoPagoClient(api_key=s.mercadopago_api_key)
    ),
}


def register_provider(name: str, builder: FactoryBuilder) -> None:
    """Register a new gateway family under name, replacing any previous entry."""
    PROVIDERS[name] = builder


def available_providers() -> List[str]:
    return list(PROVIDERS.keys())


def build_factory(provider: Union[str, ProviderFamily], settings: Optional[Settings] = None) -> PaymentProviderFactory:
    """
    Build a factory, with its own new client, for the named gateway.

    Raises:
        UnsupportedProviderError: if no gateway is registered under that name
    """
    name = provider.value if isinstance(provider, ProviderFamily) else provider
    builder = PROVIDERS.get(name) if isinstance(name, str) else None
    if builder is None:
        logger.bind(event="provider_unsupported").warning(f"Unsupported provider requested: {provider!r}")
        raise UnsupportedProviderError(str(provider), available_providers())
    factory = builder(settings or get_settings())
    logger.bind(event="provider_selected", provider=name).info("Payment provider initialized")
    return factory
