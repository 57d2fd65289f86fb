"""Compliance evaluators for the regulatory and bank policy rule sets."""

from .policy_evaluator import PolicyEvaluator
from .regulatory_evaluator import RegulatoryEvaluator

__all__ = [
    "PolicyEvaluator",
    "RegulatoryEvaluator",
]
