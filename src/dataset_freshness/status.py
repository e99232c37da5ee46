from __future__ import annotations
from enum import Enum

from .age import AgeMeasurement


class DatasetStatus(str, Enum):
    CURRENT = "CURRENT"
    STALE = "STALE"

    def __str__(self) -> str:
        return self.value


def evaluate(age: AgeMeasurement, threshold: float) -> DatasetStatus:
    if age.business_days > float(threshold):
        return DatasetStatus.STALE
    return DatasetStatus.CURRENT
