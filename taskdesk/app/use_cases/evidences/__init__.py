"""
Task Evidence Use Cases
"""

from .dtos import EvidenceInfo, UploadEvidenceCommand
from .list_evidences_use_case import ListEvidencesUseCase
from .upload_evidence_use_case import UploadEvidenceUseCase

__all__ = [
    "ListEvidencesUseCase",
    "UploadEvidenceUseCase",
    "UploadEvidenceCommand",
    "EvidenceInfo",
]
