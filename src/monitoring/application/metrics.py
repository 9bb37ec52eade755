"""
Accuracy reductions over a batch of predictions.
"""
from typing import Sequence

from ..domain import PredictionMetrics, PredictionRecord

ERROR_RATE_THRESHOLD = 0.1


def relative_error(record: PredictionRecord) -> float:
    """|predicted - actual| / actual. Raises ZeroDivisionError when actual is 0."""
    return record.error / record.actual_flow


def compute_prediction_metrics(
    records: Sequence[PredictionRecord],
    threshold: float = ERROR_RATE_THRESHOLD,
) -> PredictionMetrics:
    """
    MAPE, accuracy (100 - MAPE), mean latency and the share of records whose
    relative error exceeds ``threshold``.

    Records with a zero actual flow have no relative error: they are left out
    of MAPE, accuracy and error rate and counted in ``skipped_zero_actual``.
    They still count toward the mean prediction time.
    """
    if not records:
        return PredictionMetrics(
            accuracy=0.0, mape=0.0, avg_prediction_time=0.0, error_rate=0.0, count=0
        )

    avg_prediction_time = sum(r.prediction_time for r in records) / len(records)

    errors = [relative_error(r) for r in records if r.actual_flow != 0]
    skipped = len(records) - len(errors)

    if errors:
        mape = sum(errors) / len(errors) * 100
        accuracy = 100 - mape
        error_rate = sum(1 for e in errors if e > threshold) / len(errors) * 100
    else:
        mape = accuracy = error_rate = 0.0

    return PredictionMetrics(
        accuracy=accuracy,
        mape=mape,
        avg_prediction_time=avg_prediction_time,
        error_rate=error_rate,
        count=len(records),
        skipped_zero_actual=skipped,
    )
