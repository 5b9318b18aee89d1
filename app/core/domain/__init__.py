"""
Domain Layer - Core DDD building blocks

This module provides base classes for Domain-Driven Design:
- Entities: Objects with identity and lifecycle
- Value Objects: Immutable objects compared by value
- Exceptions: Domain-specific error handling
"""

from app.core.domain.entities import (
    Entity,
    canonical_id,
    generate_uuid_str,
)
from app.core.domain.exceptions import (
    DomainException,
    EntityNotFoundException,
    ValidationException,
)
from app.core.domain.value_objects import (
    TWO_PLACES,
    StatusEnum,
    ValueObject,
    quantize_money,
    to_decimal,
)

__all__ = [
    # Entities
    "Entity",
    "generate_uuid_str",
    "canonical_id",
    # Value Objects
    "ValueObject",
    "StatusEnum",
    "TWO_PLACES",
    "quantize_money",
    "to_decimal",
    # Exceptions
    "DomainException",
    "ValidationException",
    "EntityNotFoundException",
]
