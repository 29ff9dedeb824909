"""Access entities."""

from .learner import ACCESS_OVERRIDES, AccessOverride, Learner, add_months
from .payment import Payment

__all__ = ["ACCESS_OVERRIDES", "AccessOverride", "Learner", "Payment", "add_months"]
