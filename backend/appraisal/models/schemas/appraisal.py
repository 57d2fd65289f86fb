"""Pydantic schemas for appraisal results."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from appraisal.core.enums import CheckStatus, Decision, RiskLevel, RuleSet
from appraisal.models.schemas.application import LoanApplicationCreate


# ==================== Compliance Schemas ====================


class ComplianceCheckResponse(BaseModel):
    """Schema for a single compliance check."""

    parameter: str
    status: CheckStatus
    details: str

    model_config = ConfigDict(from_attributes=True)


class RuleDescriptionResponse(BaseModel):
    """Schema for a rule catalogue entry."""

    rule_set: RuleSet
    parameter: str
    guideline: str

    model_config = ConfigDict(from_attributes=True)


# ==================== Risk Schemas ====================


class RiskAssessmentResponse(BaseModel):
    """Schema for the composite risk assessment."""

    credit_risk: RiskLevel
    collateral_risk: RiskLevel
    overall_risk: RiskLevel
    risk_score: Decimal = Field(..., ge=0, le=100)

    model_config = ConfigDict(from_attributes=True)


# ==================== Appraisal Schemas ====================


class AppraisalResultResponse(BaseModel):
    """Schema for a complete appraisal result."""

    decision: Decision
    score: Decimal = Field(..., ge=0, le=100)
    reasons: list[str]
    regulatory_compliance: list[ComplianceCheckResponse]
    policy_compliance: list[ComplianceCheckResponse]
    risk_assessment: RiskAssessmentResponse
    recommendations: list[str]

    model_config = ConfigDict(from_attributes=True)


class BatchAppraisalRequest(BaseModel):
    """Schema for appraising several applications in one call."""

    applications: list[LoanApplicationCreate] = Field(..., min_length=1)


class BatchAppraisalResponse(BaseModel):
    """Schema for batch appraisal results, in request order."""

    results: list[AppraisalResultResponse]
    total: int
