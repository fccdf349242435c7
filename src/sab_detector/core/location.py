from sab_detector.models import format_span

__all__ = ["format_span"]
