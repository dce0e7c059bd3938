import pytest

from batteryiq import canon
from batteryiq.types import TariffPeriod, TimeWindow

ALL_DAYS = list(canon.DAYS)


@pytest.fixture
def tou_week():
    # Typical three-band TOU plan covering the whole week without overlap
    return [
        TariffPeriod(
            rate=0.45,
            name="Peak",
            time_windows=[TimeWindow(ALL_DAYS, "16:00", "21:00")],
        ),
        TariffPeriod(
            rate=0.30,
            name="Shoulder",
            time_windows=[
                TimeWindow(ALL_DAYS, "07:00", "16:00"),
                TimeWindow(ALL_DAYS, "21:00", "22:00"),
            ],
        ),
        TariffPeriod(
            rate=0.18,
            name="Off-Peak",
            time_windows=[
                TimeWindow(ALL_DAYS, "22:00", "00:00"),
                TimeWindow(ALL_DAYS, "00:00", "07:00"),
            ],
        ),
    ]


@pytest.fixture
def tou_records():
    # Tariff-period rows as persisted (camelCase JSON blobs)
    return [
        {
            "name": "Off-Peak",
            "type": "OFF_PEAK",
            "rate": 0.18,
            "sequenceOrder": 3,
            "timeWindows": [
                {"days": ALL_DAYS, "startTime": "22:00", "endTime": "00:00"},
                {"days": ALL_DAYS, "startTime": "00:00", "endTime": "07:00"},
            ],
        },
        {
            "name": "Peak",
            "type": "PEAK",
            "rate": 0.45,
            "sequenceOrder": 1,
            "timeWindows": [
                {"days": ALL_DAYS, "startTime": "16:00", "endTime": "21:00"}
            ],
        },
        {
            "name": "Shoulder",
            "type": "SHOULDER",
            "price": 0.30,
            "sequenceOrder": 2,
            "timeWindows": [
                {"days": ALL_DAYS, "startTime": "07:00", "endTime": "16:00"},
                {"days": ALL_DAYS, "startTime": "21:00", "endTime": "22:00"},
            ],
        },
    ]
