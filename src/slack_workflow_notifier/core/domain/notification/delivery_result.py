from dataclasses import dataclass


@dataclass(frozen=True)
class DeliveryResult:
    """Outcome of a best-effort notification delivery.

    A failed delivery is a value to be logged, never an exception.
    """

    delivered: bool
    error: str | None = None

    @classmethod
    def ok(cls) -> "DeliveryResult":
        return cls(delivered=True)

    @classmethod
    def failed(cls, error: str) -> "DeliveryResult":
        return cls(delivered=False, error=error)
