"""Generation and evolution engine components."""

from .errors import (
    IdleGalaxyError,
    SystemNotFoundError,
    SystemValidationError,
    VersionConflictError,
)
from .system_generator import GenerationParams, generate_system
from .time_advance import AdvanceResult, TimeAdvanceEngine, advance_system, advance_systems

__all__ = [
    "AdvanceResult",
    "GenerationParams",
    "IdleGalaxyError",
    "SystemNotFoundError",
    "SystemValidationError",
    "TimeAdvanceEngine",
    "VersionConflictError",
    "advance_system",
    "advance_systems",
    "generate_system",
]
