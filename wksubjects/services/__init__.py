"""Services layer for querying and exporting subjects."""

from .subject_service import SubjectQuery, SubjectService
from .export_service import SubjectExporter

__all__ = [
    "SubjectQuery",
    "SubjectService",
    "SubjectExporter",
]
