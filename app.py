from decimal import Decimal

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from src.audit.logger import configure_logging
from src.config import get_settings
from src.payment.exceptions import InvalidAmountError, UnsupportedProviderError
from src.payment.results import PaymentStatus
from src.payment.selector import available_providers, build_factory
from src.payment.service import PaymentService

app = FastAPI(
    title="Multi-Gateway Payments API",
    description="Routes card payments through interchangeable gateway families.",
    version="0.1.0",
)

STATUS_CODES = {
    PaymentStatus.APPROVED: 200,
    PaymentStatus.REJECTED: 400,
    PaymentStatus.FAILED: 502,
}


@app.on_event("startup")
def _startup():
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_serialize)


class PaymentRequest(BaseModel):
    provider: str
    amount: Decimal
    card_number: str


@app.get("/api/providers", tags=["Payments"])
async def list_providers():
    return {"providers": available_providers()}


@app.post("/api/payments", tags=["Payments"])
async def create_payment(payload: PaymentRequest):
    """
    Runs a payment through the selected gateway.

    - **provider**: gateway name (e.g., "Stripe", "PagSeguro", "MercadoPago")
    - **amount**: amount to charge
    - **card_number**: card number to validate and charge
    """
    try:
        factory = build_factory(payload.provider)
    except UnsupportedProviderError as e:
        return JSONResponse({"error": str(e)}, status_code=400)
    try:
        result = PaymentService(factory).process_payment(payload.amount, payload.card_number)
    except InvalidAmountError as e:
        return JSONResponse({"error": str(e)}, status_code=400)
    return JSONResponse(result.to_dict(), status_code=STATUS_CODES[result.status])


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
