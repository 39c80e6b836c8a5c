#!/usr/bin/env python3
"""
Services package initialization.
"""

from .selection_service import SelectionService
from .upload_service import UploadService, UploadOutcome

__all__ = ["SelectionService", "UploadService", "UploadOutcome"]
