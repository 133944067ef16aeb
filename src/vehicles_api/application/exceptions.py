"""Application-level exceptions translated to HTTP responses by the API layer."""


class CarNotFoundError(Exception):
    """Raised when a car with the requested ID does not exist."""

    def __init__(self, car_id: int):
        super().__init__(f"Car not found: {car_id}")
        self.car_id = car_id


class UpstreamServiceError(RuntimeError):
    """Raised when a required upstream dependency is unavailable."""

    def __init__(self, service: str, reason: str):
        super().__init__(f"{service} service unavailable: {reason}")
        self.service = service
        self.reason = reason
