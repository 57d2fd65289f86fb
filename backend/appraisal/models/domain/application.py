"""Application domain models consumed by the appraisal engine."""

from dataclasses import dataclass
from typing import Optional

from appraisal.core.enums import EmploymentType, LoanPurpose


@dataclass(frozen=True)
class LoanApplication:
    """
    Financial facts of a single loan application.

    Values are assumed to be pre-verified by the caller. The engine does not
    range-check them: a zero income or an out-of-range credit score flows
    into the ratios and checks as-is.

    Attributes:
        applicant_name: Applicant full name
        loan_amount: Requested loan amount
        loan_purpose: Declared purpose of the loan
        annual_income: Gross annual income
        credit_score: Bureau credit score (300-900 domain)
        employment_type: Employment category
        employment_years: Years in current employment, fractional allowed
        existing_loans: Monthly debt service on existing loans
        collateral_value: Assessed value of pledged collateral
        business_vintage: Years in business, reserved and not used by any rule
        debt_to_income: Explicit DTI percentage; None means derive it
    """

    applicant_name: str
    loan_amount: float
    loan_purpose: LoanPurpose
    annual_income: float
    credit_score: int
    employment_type: EmploymentType
    employment_years: float = 0.0
    existing_loans: float = 0.0
    collateral_value: float = 0.0
    business_vintage: Optional[float] = None
    debt_to_income: Optional[float] = None


@dataclass(frozen=True)
class DerivedRatios:
    """
    Ratios derived from a loan application.

    Attributes:
        loan_to_income: Loan amount divided by annual income
        loan_to_value: Loan amount divided by collateral value (0 without collateral)
        debt_to_income: Debt-to-income as a percentage
    """

    loan_to_income: float
    loan_to_value: float
    debt_to_income: float
