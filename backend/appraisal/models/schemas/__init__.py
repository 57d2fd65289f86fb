"""Pydantic schemas for API validation and serialization."""

from appraisal.models.schemas.application import LoanApplicationCreate
from appraisal.models.schemas.appraisal import (
    AppraisalResultResponse,
    BatchAppraisalRequest,
    BatchAppraisalResponse,
    ComplianceCheckResponse,
    RiskAssessmentResponse,
    RuleDescriptionResponse,
)

__all__ = [
    # Application schemas
    "LoanApplicationCreate",
    # Appraisal schemas
    "AppraisalResultResponse",
    "BatchAppraisalRequest",
    "BatchAppraisalResponse",
    "ComplianceCheckResponse",
    "RiskAssessmentResponse",
    "RuleDescriptionResponse",
]
