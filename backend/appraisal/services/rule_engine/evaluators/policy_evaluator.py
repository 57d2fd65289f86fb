"""Bank policy rule evaluator for internal lending limits."""

from appraisal.core.enums import CheckStatus, RuleSet
from appraisal.models.domain.appraisal import ComplianceCheck
from appraisal.services.rule_engine.base import (
    ComplianceRule,
    EvaluationContext,
    RuleSetEvaluator,
    Thresholds,
)
from appraisal.services.rule_engine.ratios import safe_divide


class DebtToIncomeRule(ComplianceRule):
    """
    Debt-to-income cap, in percent.

    PASS at or below 40%, WARNING up to 50%, FAIL above.
    """

    rule_set = RuleSet.POLICY
    parameter = "Debt-to-Income"
    guideline = "Bank policy: Max 40% recommended, 50% absolute limit."
    thresholds = Thresholds(pass_at=40, warn_at=50)

    def evaluate(self, context: EvaluationContext) -> ComplianceCheck:
        dti = context.ratios.debt_to_income
        return self._check(
            self.thresholds.classify(dti),
            f"DTI: {dti:.2f}%. {self.guideline}",
        )


class EmploymentStabilityRule(ComplianceRule):
    """
    Minimum time in current employment.

    PASS from 2 years, WARNING from 1 year, FAIL below.
    """

    rule_set = RuleSet.POLICY
    parameter = "Employment Stability"
    guideline = "Min required: 2 years for salaried, 3 years for self-employed."
    thresholds = Thresholds(pass_at=2, warn_at=1, higher_is_better=True)

    def evaluate(self, context: EvaluationContext) -> ComplianceCheck:
        years = context.application.employment_years
        return self._check(
            self.thresholds.classify(years),
            f"Employment: {years:.2f} years. {self.guideline}",
        )


class LoanToIncomeRule(ComplianceRule):
    """
    Loan amount relative to annual income.

    PASS at or below 5x, WARNING up to 7x, FAIL above.
    """

    rule_set = RuleSet.POLICY
    parameter = "Loan-to-Income"
    guideline = "Max recommended: 5x annual income."
    thresholds = Thresholds(pass_at=5, warn_at=7)

    def evaluate(self, context: EvaluationContext) -> ComplianceCheck:
        lti = context.ratios.loan_to_income
        return self._check(
            self.thresholds.classify(lti),
            f"Loan-to-Income: {lti:.2f}x. {self.guideline}",
        )


class CollateralCoverageRule(ComplianceRule):
    """
    Collateral cover over the loan amount.

    PASS when collateral is at least 120% of the loan, WARNING from 100%,
    FAIL below.
    """

    rule_set = RuleSet.POLICY
    parameter = "Collateral Coverage"
    guideline = "Min required: 120%."

    def evaluate(self, context: EvaluationContext) -> ComplianceCheck:
        application = context.application
        collateral = application.collateral_value
        loan_amount = application.loan_amount

        if collateral >= loan_amount * 1.2:
            status = CheckStatus.PASS
        elif collateral >= loan_amount:
            status = CheckStatus.WARNING
        else:
            status = CheckStatus.FAIL

        coverage = safe_divide(collateral, loan_amount) * 100
        return self._check(
            status,
            f"Collateral coverage: {coverage:.2f}%. {self.guideline}",
        )


class PolicyEvaluator(RuleSetEvaluator):
    """
    Evaluator for internal bank policy rules.

    Handles, in order:
    - Debt-to-Income
    - Employment Stability
    - Loan-to-Income
    - Collateral Coverage
    """

    rule_set = RuleSet.POLICY
    rules = (
        DebtToIncomeRule(),
        EmploymentStabilityRule(),
        LoanToIncomeRule(),
        CollateralCoverageRule(),
    )
