"""Rule engine for appraising loan applications."""

from .base import ComplianceRule, EvaluationContext, RuleSetEvaluator, Thresholds
from .engine import AppraisalEngine, RuleDescription, evaluate
from .ratios import derive_ratios
from .risk import RiskAssessor, assess_risk
from .scoring import DecisionOutcome, ScoringEngine

__all__ = [
    "AppraisalEngine",
    "ComplianceRule",
    "DecisionOutcome",
    "EvaluationContext",
    "RiskAssessor",
    "RuleDescription",
    "RuleSetEvaluator",
    "ScoringEngine",
    "Thresholds",
    "assess_risk",
    "derive_ratios",
    "evaluate",
]
