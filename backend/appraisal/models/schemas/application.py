"""Pydantic schemas for loan application input."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from appraisal.core.enums import EmploymentType, LoanPurpose
from appraisal.models.domain.application import LoanApplication


class LoanApplicationCreate(BaseModel):
    """
    Schema for a loan application submitted for appraisal.

    This is the validation boundary in front of the engine: values accepted
    here are handed over as pre-verified facts. Unset amounts and years
    default to 0, and the DTI override is only used when given.
    """

    applicant_name: str = Field(..., min_length=1, max_length=255)
    loan_amount: float = Field(..., gt=0)
    loan_purpose: LoanPurpose = LoanPurpose.HOME
    annual_income: float = Field(..., gt=0)
    credit_score: int = Field(..., ge=300, le=900)
    employment_type: EmploymentType = EmploymentType.SALARIED
    employment_years: float = Field(0, ge=0)
    existing_loans: float = Field(0, ge=0, description="Monthly debt service")
    collateral_value: float = Field(0, ge=0)
    business_vintage: Optional[float] = Field(None, ge=0)
    debt_to_income: Optional[float] = Field(
        None, ge=0, description="Explicit DTI percentage; derived when omitted"
    )

    @field_validator("applicant_name")
    @classmethod
    def validate_applicant_name(cls, v: str) -> str:
        """Ensure applicant name is not blank."""
        v = v.strip()
        if not v:
            raise ValueError("Applicant name must not be blank")
        return v

    def to_domain(self) -> LoanApplication:
        """Convert to the immutable engine input."""
        return LoanApplication(**self.model_dump())
