"""Application services."""

from pgen.services.up import StepStatus, UpReport, UpService

__all__ = ["StepStatus", "UpReport", "UpService"]
