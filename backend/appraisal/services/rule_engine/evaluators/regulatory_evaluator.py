"""Regulatory rule evaluator for central bank lending guidelines."""

from appraisal.core.enums import CheckStatus, LoanPurpose, RuleSet
from appraisal.models.domain.appraisal import ComplianceCheck
from appraisal.services.rule_engine.base import (
    ComplianceRule,
    EvaluationContext,
    RuleSetEvaluator,
    Thresholds,
)

PRIORITY_SECTOR_PURPOSES = frozenset(
    {LoanPurpose.AGRICULTURE, LoanPurpose.MSME, LoanPurpose.EDUCATION}
)


class LoanToValueRule(ComplianceRule):
    """
    Loan-to-value cap.

    PASS at or below 80%, WARNING up to 90%, FAIL above.
    """

    rule_set = RuleSet.REGULATORY
    parameter = "LTV Ratio"
    guideline = "RBI guidelines recommend max 80% LTV for priority sector loans."
    thresholds = Thresholds(pass_at=0.80, warn_at=0.90)

    def evaluate(self, context: EvaluationContext) -> ComplianceCheck:
        ltv = context.ratios.loan_to_value
        return self._check(
            self.thresholds.classify(ltv),
            f"LTV: {ltv * 100:.2f}%. {self.guideline}",
        )


class CreditInformationReportRule(ComplianceRule):
    """
    Bureau credit score floor.

    PASS from 700, WARNING from 650, FAIL below.
    """

    rule_set = RuleSet.REGULATORY
    parameter = "Credit Information Report"
    guideline = "Min recommended: 650-700 as per CIBIL standards."
    thresholds = Thresholds(pass_at=700, warn_at=650, higher_is_better=True)

    def evaluate(self, context: EvaluationContext) -> ComplianceCheck:
        credit_score = context.application.credit_score
        return self._check(
            self.thresholds.classify(credit_score),
            f"Credit Score: {credit_score}. {self.guideline}",
        )


class KycComplianceRule(ComplianceRule):
    """KYC is verified upstream; the check always passes."""

    rule_set = RuleSet.REGULATORY
    parameter = "KYC Compliance"
    guideline = "Assumed KYC documents verified as per PMLA guidelines."

    def evaluate(self, context: EvaluationContext) -> ComplianceCheck:
        return self._check(CheckStatus.PASS, self.guideline)


class PrioritySectorRule(ComplianceRule):
    """
    Priority sector classification.

    Agriculture, MSME and education loans pass. Anything else is a warning,
    never a failure.
    """

    rule_set = RuleSet.REGULATORY
    parameter = "Priority Sector Classification"
    guideline = "Priority sector lending targets: 40% of credit for domestic banks."

    def evaluate(self, context: EvaluationContext) -> ComplianceCheck:
        if context.application.loan_purpose in PRIORITY_SECTOR_PURPOSES:
            return self._check(
                CheckStatus.PASS,
                f"Eligible for priority sector lending. {self.guideline}",
            )
        return self._check(CheckStatus.WARNING, "Non-priority sector loan.")


class RegulatoryEvaluator(RuleSetEvaluator):
    """
    Evaluator for regulatory rules.

    Handles, in order:
    - LTV Ratio
    - Credit Information Report
    - KYC Compliance
    - Priority Sector Classification
    """

    rule_set = RuleSet.REGULATORY
    rules = (
        LoanToValueRule(),
        CreditInformationReportRule(),
        KycComplianceRule(),
        PrioritySectorRule(),
    )
