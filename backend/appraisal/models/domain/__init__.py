"""Domain models for the application."""

from appraisal.models.domain.application import DerivedRatios, LoanApplication
from appraisal.models.domain.appraisal import (
    AppraisalResult,
    ComplianceCheck,
    RiskAssessment,
)

__all__ = [
    "LoanApplication",
    "DerivedRatios",
    "ComplianceCheck",
    "RiskAssessment",
    "AppraisalResult",
]
