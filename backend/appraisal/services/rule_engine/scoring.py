"""Eligibility scoring, decision selection and rationale generation."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, List, Sequence

from appraisal.core.enums import CheckStatus, Decision, RiskLevel
from appraisal.models.domain.application import DerivedRatios, LoanApplication
from appraisal.models.domain.appraisal import ComplianceCheck, RiskAssessment

STATUS_POINTS = {
    CheckStatus.PASS: Decimal("12.5"),
    CheckStatus.WARNING: Decimal("6.25"),
    CheckStatus.FAIL: Decimal("0"),
}

REJECT_MIN_FAILURES = 3
REVIEW_MIN_WARNINGS = 3


@dataclass(frozen=True)
class DecisionOutcome:
    """
    Score, decision and rationale for one application.

    Attributes:
        score: Eligibility score (0-100)
        decision: Final decision
        failed_count: Number of FAIL checks across both rule sets
        warning_count: Number of WARNING checks across both rule sets
        reasons: Decision rationale
        recommendations: Suggested next steps
    """

    score: Decimal
    decision: Decision
    failed_count: int
    warning_count: int
    reasons: tuple[str, ...]
    recommendations: tuple[str, ...]


class ScoringEngine:
    """
    Scoring engine turning check statuses and risk into a decision.

    The score is computed from check statuses alone while the decision uses
    failure and warning counts together with the overall risk band. The two
    can therefore disagree: a high score may still be rejected on risk.
    """

    @staticmethod
    def calculate_score(checks: Iterable[ComplianceCheck]) -> Decimal:
        """
        Sum the points of every check.

        With the eight standard checks a PASS is worth 12.5 and a WARNING
        6.25, so the result lies between 0 and 100.

        Args:
            checks: Compliance checks from both rule sets

        Returns:
            Eligibility score
        """
        return sum((STATUS_POINTS[check.status] for check in checks), Decimal("0"))

    @staticmethod
    def count_status(checks: Iterable[ComplianceCheck], status: CheckStatus) -> int:
        return sum(1 for check in checks if check.status == status)

    @staticmethod
    def decide(
        failed_count: int, warning_count: int, overall_risk: RiskLevel
    ) -> Decision:
        """
        Select the decision. Rejection is checked first, then review.

        Args:
            failed_count: Number of FAIL checks
            warning_count: Number of WARNING checks
            overall_risk: Overall risk band

        Returns:
            The decision
        """
        if failed_count >= REJECT_MIN_FAILURES or overall_risk == RiskLevel.HIGH:
            return Decision.REJECTED
        if (
            failed_count >= 1
            or warning_count >= REVIEW_MIN_WARNINGS
            or overall_risk == RiskLevel.MEDIUM
        ):
            return Decision.REVIEW_REQUIRED
        return Decision.APPROVED

    @staticmethod
    def build_rationale(
        decision: Decision,
        failed_count: int,
        warning_count: int,
        application: LoanApplication,
        ratios: DerivedRatios,
    ) -> tuple[List[str], List[str]]:
        """
        Build reasons and recommendations for a decision.

        The text is explanatory only and has no effect on score or decision.

        Returns:
            Tuple of (reasons, recommendations)
        """
        reasons: List[str] = []
        recommendations: List[str] = []

        if decision == Decision.REJECTED:
            reasons.append(
                f"High risk profile with {failed_count} critical compliance failures."
            )
            if application.credit_score < 650:
                reasons.append("Credit score below minimum threshold.")
            if ratios.debt_to_income > 50:
                reasons.append("Debt-to-income ratio exceeds acceptable limits.")
            if ratios.loan_to_value > 0.9:
                reasons.append("Insufficient collateral coverage.")

            recommendations.extend(
                [
                    "Applicant should improve credit score before reapplying.",
                    "Consider reducing loan amount or increasing collateral value.",
                    "Clear existing debts to improve DTI ratio.",
                ]
            )
        elif decision == Decision.REVIEW_REQUIRED:
            reasons.append(
                "Application requires senior management review due to "
                f"{warning_count} warnings and {failed_count} failures."
            )
            if application.credit_score < 700:
                reasons.append("Credit score in acceptable but cautionary range.")
            if ratios.debt_to_income > 40:
                reasons.append("Debt-to-income ratio above recommended threshold.")

            recommendations.extend(
                [
                    "Request additional documentation and income proof.",
                    "Consider co-applicant or guarantor to strengthen application.",
                    "Verify employment and conduct detailed background check.",
                    "May approve with higher interest rate or stricter terms.",
                ]
            )
        else:
            reasons.extend(
                [
                    "All critical compliance checks passed.",
                    "Strong credit profile and adequate collateral coverage.",
                    "Meets RBI and internal bank policy requirements.",
                ]
            )
            recommendations.extend(
                [
                    "Proceed with standard loan documentation.",
                    "Offer competitive interest rates as per risk category.",
                    "Complete legal and technical due diligence.",
                ]
            )

        return reasons, recommendations

    @classmethod
    def score_and_decide(
        cls,
        regulatory: Sequence[ComplianceCheck],
        policy: Sequence[ComplianceCheck],
        risk: RiskAssessment,
        application: LoanApplication,
        ratios: DerivedRatios,
    ) -> DecisionOutcome:
        """
        Score the checks and select a decision with its rationale.

        Args:
            regulatory: Regulatory compliance checks
            policy: Bank policy compliance checks
            risk: Composite risk assessment
            application: The loan application
            ratios: Ratios derived from the application

        Returns:
            DecisionOutcome
        """
        checks = list(regulatory) + list(policy)

        score = cls.calculate_score(checks)
        failed_count = cls.count_status(checks, CheckStatus.FAIL)
        warning_count = cls.count_status(checks, CheckStatus.WARNING)

        decision = cls.decide(failed_count, warning_count, risk.overall_risk)
        reasons, recommendations = cls.build_rationale(
            decision, failed_count, warning_count, application, ratios
        )

        return DecisionOutcome(
            score=score,
            decision=decision,
            failed_count=failed_count,
            warning_count=warning_count,
            reasons=tuple(reasons),
            recommendations=tuple(recommendations),
        )
