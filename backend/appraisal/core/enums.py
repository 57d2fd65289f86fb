"""Core enums for type safety across the application."""

from enum import Enum


class LoanPurpose(str, Enum):
    """Purpose tag declared on a loan application."""

    HOME = "home"
    PERSONAL = "personal"
    BUSINESS = "business"
    VEHICLE = "vehicle"
    EDUCATION = "education"
    AGRICULTURE = "agriculture"
    MSME = "msme"


class EmploymentType(str, Enum):
    """Applicant employment categories."""

    SALARIED = "salaried"
    SELF_EMPLOYED = "self-employed"
    BUSINESS = "business"
    PROFESSIONAL = "professional"


class CheckStatus(str, Enum):
    """Outcome of a single compliance check."""

    PASS = "PASS"
    WARNING = "WARNING"
    FAIL = "FAIL"


class RiskLevel(str, Enum):
    """Ordinal risk band."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class Decision(str, Enum):
    """Final appraisal decision."""

    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
    REVIEW_REQUIRED = "REVIEW_REQUIRED"


class RuleSet(str, Enum):
    """Compliance rule sets evaluated for every application."""

    # External regulator guidelines
    REGULATORY = "regulatory"

    # Internal bank lending policy
    POLICY = "policy"
