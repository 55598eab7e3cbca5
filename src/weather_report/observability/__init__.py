from .domain import ReportDelivered

# Sinks live in observability.adapters; importing them here would cycle through ports.
__all__ = ["ReportDelivered"]
