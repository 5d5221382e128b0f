"""
Domain entities package.
"""

from .job import ComplianceReport, Job, MaterialEntry, ProgressEntry
from .operator_profile import OperatorProfile, ProfilePreferences
from .quote import LabourEstimate, MaterialLine, MaterialsEstimate, Quote

__all__ = [
    "ComplianceReport",
    "Job",
    "LabourEstimate",
    "MaterialEntry",
    "MaterialLine",
    "MaterialsEstimate",
    "OperatorProfile",
    "ProfilePreferences",
    "ProgressEntry",
    "Quote",
]
