import os
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel

# Load environment variables from project root .env explicitly
_project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
_env_path = os.path.join(_project_root, ".env")


class Settings(BaseModel):
    default_provider: str = "Stripe"
    log_level: str = "INFO"
    log_serialize: bool = True
    pagseguro_api_key: Optional[str] = None
    mercadopago_api_key: Optional[str] = None
    stripe_api_key: Optional[str] = None


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def load_settings() -> Settings:
    load_dotenv(dotenv_path=_env_path, override=False)
    return Settings(
        default_provider=os.getenv("PAYMENT_PROVIDER", "Stripe"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        log_serialize=_env_flag("LOG_SERIALIZE", True),
        pagseguro_api_key=os.getenv("PAGSEGURO_API_KEY"),
        mercadopago_api_key=os.getenv("MERCADOPAGO_API_KEY"),
        stripe_api_key=os.getenv("STRIPE_API_KEY"),
    )


@lru_cache()
def get_settings() -> Settings:
    return load_settings()
