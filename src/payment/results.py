from dataclasses import dataclass, field, asdict
from datetime import datetime
from enum import Enum
from typing import Optional, Dict, Any


class PaymentStatus(str, Enum):
    APPROVED = "approved"
    REJECTED = "rejected"
    FAILED = "failed"


@dataclass(frozen=True)
class PaymentLogRecord:
    provider: str
    message: str
    transaction_id: str
    created_at: datetime = field(default_factory=datetime.utcnow)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["created_at"] = self.created_at.isoformat() + "Z"
        return data


@dataclass(frozen=True)
class PaymentResult:
    """
    Outcome of one payment attempt.
    - approved: transaction_id is set; log_record is None only if logging failed (see log_error)
    - rejected: card failed validation, nothing was charged
    - failed: the processor raised, nothing was logged
    """
    status: PaymentStatus
    provider: str
    transaction_id: Optional[str] = None
    reason: Optional[str] = None
    log_record: Optional[PaymentLogRecord] = None
    log_error: Optional[str] = None

    @classmethod
    def approved(cls, provider: str, transaction_id: str, log_record: Optional[PaymentLogRecord] = None,
                 log_error: Optional[str] = None) -> "PaymentResult":
        return cls(PaymentStatus.APPROVED, provider, transaction_id=transaction_id,
                   log_record=log_record, log_error=log_error)

    @classmethod
    def rejected(cls, provider: str, reason: str = "invalid card") -> "PaymentResult":
        return cls(PaymentStatus.REJECTED, provider, reason=reason)

    @classmethod
    def failed(cls, provider: str, reason: str) -> "PaymentResult":
        return cls(PaymentStatus.FAILED, provider, reason=reason)

    @property
    def is_approved(self) -> bool:
        return self.status is PaymentStatus.APPROVED

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"status": self.status.value, "provider": self.provider}
        if self.transaction_id is not None:
            data["transaction_id"] = self.transaction_id
        if self.reason is not None:
            data["reason"] = self.reason
        if self.status is PaymentStatus.APPROVED:
            data["log_record"] = self.log_record.to_dict() if self.log_record else None
            if self.log_error:
                data["log_error"] = self.log_error
        return data
