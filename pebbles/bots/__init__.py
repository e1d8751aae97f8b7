"""
Bots module - Computer opponent implementations.

Provides:
- BotPolicy: Interface for bot decision-making
- EasyPolicy / HardPolicy: One policy per difficulty
- decide: Entry point used by the engine
"""

from .policy import (
    BotPolicy,
    BotDecision,
    EasyPolicy,
    HardPolicy,
    POLICIES,
    policy_for,
    decide,
)

__all__ = [
    "BotPolicy",
    "BotDecision",
    "EasyPolicy",
    "HardPolicy",
    "POLICIES",
    "policy_for",
    "decide",
]
