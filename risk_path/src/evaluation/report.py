from __future__ import annotations

"""Timing and result reporting for solver runs."""

import time
from dataclasses import dataclass
from typing import List, Optional


class Stopwatch:
    """Context manager measuring wall-clock time.

    ``elapsed`` can be read inside the ``with`` block and after it.
    """

    def __init__(self) -> None:
        self.t0: Optional[float] = None
        self.t1: Optional[float] = None

    def __enter__(self) -> "Stopwatch":
        self.t0 = time.perf_counter()
        self.t1 = None
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.t1 = time.perf_counter()
        return False

    @property
    def elapsed(self) -> float:
        """Seconds elapsed."""
        if self.t0 is None:
            return 0.0
        if self.t1 is None:
            return time.perf_counter() - self.t0
        return self.t1 - self.t0

    @property
    def elapsed_ms(self) -> float:
        return self.elapsed * 1000.0


@dataclass
class SolveReport:
    label: str
    source: int
    target: int
    vertex_count: int
    total_risk: int
    elapsed_ms: float
    reachable: bool = True


def format_report(report: SolveReport, show_timing: bool = True) -> List[str]:
    """Return the printable lines describing ``report``."""
    lines = [f"{report.label}:"]
    end = f"{report.target + 1:,}"
    if report.reachable:
        lines.append(
            f"The overall risk from start ({report.source}) to end ({end}) is: "
            f"{report.total_risk}"
        )
    else:
        lines.append(f"Target is unreachable from start ({report.source}) to end ({end})")
    if show_timing:
        lines.append(f"The calculation took {report.elapsed_ms:.3f}ms.")
    return lines


__all__ = ["Stopwatch", "SolveReport", "format_report"]
