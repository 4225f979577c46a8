"""
Form state for the dashboards.

- JobPostForm: client "post a job" form with pincode-resolved addresses
- ApplicationForm: freelancer proposal for a selected job
"""

from fasttruck.forms.job_form import ApplicationForm, FormValidationError, JobPostForm

__all__ = ["ApplicationForm", "FormValidationError", "JobPostForm"]
