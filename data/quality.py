"""
Invariant checks for daily series.

Every engine assumes a non-empty, strictly date-ascending series with a
positive close on each point.  ``validate_series`` reports violations,
and raises when asked to.
"""
from dataclasses import dataclass, asdict, field
from typing import Dict, List, Sequence

from ..errors import SeriesValidationError
from .models import DailyPoint, parse_date


@dataclass
class SeriesQualityReport:
    """Structured result of series invariant checks with warning tags."""
    passed: bool
    metrics: Dict[str, float] = field(default_factory=dict)
    warnings: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict:
        """Serialize SeriesQualityReport to a dictionary."""
        return asdict(self)


def validate_series(
    series: Sequence[DailyPoint],
    ticker: str = "",
    fail_on_error: bool = False,
) -> SeriesQualityReport:
    """Check the DailyPoint invariant.

    Parameters
    ----------
    series : sequence of DailyPoint
        Series to check.
    ticker : str
        Used in messages only.
    fail_on_error : bool
        When True, raise ``SeriesValidationError`` if any check fails.
        When False (default), return the report with ``passed=False``.

    Raises
    ------
    SeriesValidationError
        If ``fail_on_error=True`` and any check fails.
    """
    label = ticker or "series"
    warnings: List[str] = []

    if not series:
        warnings.append("empty_series")
        return _finish(SeriesQualityReport(False, {"n_points": 0.0}, warnings), label, fail_on_error)

    bad_dates = 0
    for point in series:
        try:
            parse_date(point.date)
        except ValueError:
            bad_dates += 1

    unsorted = sum(1 for a, b in zip(series, series[1:]) if b.date < a.date)
    duplicates = sum(1 for a, b in zip(series, series[1:]) if b.date == a.date)
    non_positive = sum(1 for p in series if not p.close > 0)

    if bad_dates:
        warnings.append(f"invalid_dates:{bad_dates}")
    if unsorted:
        warnings.append(f"unsorted_dates:{unsorted}")
    if duplicates:
        warnings.append(f"duplicate_dates:{duplicates}")
    if non_positive:
        warnings.append(f"non_positive_close:{non_positive}")

    report = SeriesQualityReport(
        passed=not warnings,
        metrics={
            "n_points": float(len(series)),
            "invalid_dates": float(bad_dates),
            "unsorted_dates": float(unsorted),
            "duplicate_dates": float(duplicates),
            "non_positive_close": float(non_positive),
        },
        warnings=warnings,
    )
    return _finish(report, label, fail_on_error)


def _finish(report: SeriesQualityReport, label: str, fail_on_error: bool) -> SeriesQualityReport:
    if fail_on_error and not report.passed:
        raise SeriesValidationError(
            f"{label} failed series checks: {', '.join(report.warnings)}"
        )
    return report
