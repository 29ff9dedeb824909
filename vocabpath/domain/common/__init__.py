"""Shared building blocks for the curriculum, access and progression contexts."""

from .aggregate_root import AggregateRoot
from .domain_event import DomainEvent
from .entity import Entity, EntityId
from .exceptions import DomainError, InvariantViolationError, ValidationError
from .value_object import ValueObject

__all__ = [
    "AggregateRoot",
    "DomainError",
    "DomainEvent",
    "Entity",
    "EntityId",
    "InvariantViolationError",
    "ValidationError",
    "ValueObject",
]
