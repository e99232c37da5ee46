import pytest

from dataset_freshness.age import AgeMeasurement
from dataset_freshness.status import DatasetStatus, evaluate


@pytest.mark.parametrize(
    "business_days,threshold,expected",
    [
        (0.0, 0, DatasetStatus.CURRENT),
        (4.9, 5, DatasetStatus.CURRENT),
        (5.0, 5, DatasetStatus.CURRENT),
        (5.01, 5, DatasetStatus.STALE),
        (3.0, 2.5, DatasetStatus.STALE),
    ],
)
def test_strictly_greater_is_stale(business_days, threshold, expected):
    assert evaluate(AgeMeasurement(business_days + 1, business_days), threshold) is expected


def test_depends_only_on_business_days():
    a = evaluate(AgeMeasurement(10.0, 3.0), 4)
    b = evaluate(AgeMeasurement(3.0, 3.0), 4)
    assert a is b is DatasetStatus.CURRENT


def test_status_text():
    assert str(DatasetStatus.STALE) == "STALE"
    assert f"{DatasetStatus.CURRENT}" == "CURRENT"
