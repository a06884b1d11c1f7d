"""Error types raised by the scoring engines and the catalog service."""


class EngineError(Exception):
    """Base class for engine errors reported to callers."""


class InvalidArgumentError(EngineError, ValueError):
    """Raised when a request parameter is outside its allowed range."""


class FoodNotFoundError(EngineError, LookupError):
    """Raised when a referenced food id is absent from the catalog."""

    def __init__(self, food_id: int) -> None:
        super().__init__(f"Food not found: {food_id}")
        self.food_id = food_id
