"""Public façade for the daily_mood.core package.

This module exposes logging helpers, JSON file utilities, and the domain
models shared by every pipeline stage. Other packages should import these
cross-cutting concerns from this façade instead of the internal submodules.
"""

from .fs_utils import ensure_parent_dir, read_json, write_json
from .logging_config import configure_logging
from .logging_utils import (
    log_error,
    log_info,
    log_progress,
    log_section,
    log_step,
    log_success,
    log_warning,
)
from .models import AudioFeatures, Element, ElementResult, MoodSummary, Track

__all__ = [
    "configure_logging",
    "log_section",
    "log_info",
    "log_step",
    "log_success",
    "log_warning",
    "log_error",
    "log_progress",
    "ensure_parent_dir",
    "write_json",
    "read_json",
    "Track",
    "AudioFeatures",
    "MoodSummary",
    "Element",
    "ElementResult",
]
