"""Domain policies package."""

from .work_status import classify_work_status

__all__ = ["classify_work_status"]
