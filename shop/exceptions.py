"""Domain errors raised by the models and translated by the views."""


class ShopError(Exception):
    """Base class for shop domain errors."""


class DuplicateMemberError(ShopError):
    """An account with this email already exists."""

    def __init__(self, message='This email is already registered.'):
        super().__init__(message)


class OutOfStockError(ShopError):
    """Requested count exceeds the item's stock."""


class OrderCancelError(ShopError):
    """The order cannot be cancelled."""
