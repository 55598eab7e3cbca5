from .records import LEVELS, ReportDelivered

__all__ = ["LEVELS", "ReportDelivered"]
