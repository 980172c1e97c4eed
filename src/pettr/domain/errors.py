"""Errors raised by the food tracker."""


class ConsumptionError(ValueError):
    """Base class for consumption calculation failures."""


class InvalidUnit(ConsumptionError):
    """Unit is unknown or not permitted for the food type and field."""


class InvalidQuantity(ConsumptionError):
    """Quantity is non-numeric, negative, or otherwise unusable."""


class DivisionByZero(ConsumptionError):
    """Daily amount normalizes to zero grams."""


class InvalidExpectedDays(ConsumptionError):
    """Expected days must be a positive integer."""


class FoodServiceError(Exception):
    """Base class for food service failures surfaced to API callers."""


class ValidationError(FoodServiceError):
    """Request data failed validation."""


class NotFoundError(FoodServiceError):
    """Requested food entry does not exist for the pet."""


class ActiveEntryExists(FoodServiceError):
    """The pet already has an active entry of the same food type."""
