"""JSON formatter."""

import json

from ..models import AnalysisReport
from .base import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Render the report as JSON."""

    def render(self, report: AnalysisReport) -> None:
        print(self.format(report))

    def format(self, report: AnalysisReport) -> str:
        return json.dumps(report.to_dict(), indent=2)
