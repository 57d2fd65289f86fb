import pytest
from fastapi.testclient import TestClient

from appraisal.core.enums import EmploymentType, LoanPurpose
from appraisal.main import app
from appraisal.models.domain.application import LoanApplication


def build_application(**overrides) -> LoanApplication:
    """Application that passes every check with low risk unless overridden."""
    fields = {
        "applicant_name": "Test Applicant",
        "loan_amount": 1_000_000,
        "loan_purpose": LoanPurpose.EDUCATION,
        "annual_income": 1_000_000,
        "credit_score": 800,
        "employment_type": EmploymentType.SALARIED,
        "employment_years": 5,
        "existing_loans": 0,
        "collateral_value": 2_000_000,
    }
    fields.update(overrides)
    return LoanApplication(**fields)


@pytest.fixture
def make_application():
    return build_application


@pytest.fixture
def client():
    app.dependency_overrides.clear()
    yield TestClient(app)
    app.dependency_overrides.clear()
