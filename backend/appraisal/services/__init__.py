"""Service layer for business logic."""

from appraisal.services.appraisal_service import AppraisalService

__all__ = ["AppraisalService"]
