"""Appraisal outcome domain models."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Tuple

from appraisal.core.enums import CheckStatus, Decision, RiskLevel


@dataclass(frozen=True)
class ComplianceCheck:
    """
    Result of evaluating one named compliance rule.

    Attributes:
        parameter: Human-readable label of the checked parameter
        status: PASS, WARNING or FAIL
        details: Explanation embedding the computed value and guideline
    """

    parameter: str
    status: CheckStatus
    details: str


@dataclass(frozen=True)
class RiskAssessment:
    """Composite credit and collateral risk."""

    credit_risk: RiskLevel
    collateral_risk: RiskLevel
    overall_risk: RiskLevel
    risk_score: Decimal


@dataclass(frozen=True)
class AppraisalResult:
    """
    Complete appraisal of a loan application.

    Sequences are tuples so a result can be shared between callers without
    any of them mutating it.

    Attributes:
        decision: Final categorical decision
        score: Eligibility score (0-100) from the eight check statuses
        reasons: Decision rationale, in display order
        regulatory_compliance: Regulatory checks, in evaluation order
        policy_compliance: Internal policy checks, in evaluation order
        risk_assessment: Composite risk assessment
        recommendations: Suggested next steps, in display order
    """

    decision: Decision
    score: Decimal
    reasons: Tuple[str, ...]
    regulatory_compliance: Tuple[ComplianceCheck, ...]
    policy_compliance: Tuple[ComplianceCheck, ...]
    risk_assessment: RiskAssessment
    recommendations: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def all_checks(self) -> Tuple[ComplianceCheck, ...]:
        """Regulatory checks followed by policy checks."""
        return self.regulatory_compliance + self.policy_compliance
