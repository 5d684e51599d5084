class DishBankError(Exception):
    pass


class DishSourceError(DishBankError):
    """The remote dish API could not be reached or returned unusable data."""


class DishValidationError(DishBankError, ValueError):
    """A user-submitted dish was rejected before any network call."""
