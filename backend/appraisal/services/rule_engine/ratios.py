"""Derivation of financial ratios from a loan application."""

import math

from appraisal.models.domain.application import DerivedRatios, LoanApplication


def safe_divide(numerator: float, denominator: float) -> float:
    """
    Divide with IEEE semantics instead of raising on a zero denominator.

    x / 0 is +inf (or -inf) for non-zero x and 0 / 0 is NaN, so degenerate
    applications yield non-finite ratios that still fall through the
    threshold tables deterministically.
    """
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator)
    return numerator / denominator


def derive_ratios(application: LoanApplication) -> DerivedRatios:
    """
    Compute loan-to-income, loan-to-value and debt-to-income.

    Args:
        application: The loan application to derive ratios for

    Returns:
        DerivedRatios for the application
    """
    loan_to_income = safe_divide(application.loan_amount, application.annual_income)

    # Without collateral the LTV is reported as 0, which passes the LTV check
    if application.collateral_value > 0:
        loan_to_value = application.loan_amount / application.collateral_value
    else:
        loan_to_value = 0.0

    if application.debt_to_income is not None:
        debt_to_income = float(application.debt_to_income)
    else:
        debt_to_income = (
            safe_divide(application.existing_loans, application.annual_income) * 100
        )

    return DerivedRatios(
        loan_to_income=loan_to_income,
        loan_to_value=loan_to_value,
        debt_to_income=debt_to_income,
    )
