from .report import SolveReport, Stopwatch, format_report

__all__ = ["SolveReport", "Stopwatch", "format_report"]
