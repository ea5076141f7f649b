"""Report rendering."""
from hddcheck.report.renderer import ReportRenderer

__all__ = ['ReportRenderer']
