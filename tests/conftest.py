import pandas as pd
import pytest

from vwap_bands import Bar


@pytest.fixture
def three_bars():
    # 典型价格分别是 9, 11, 12
    return [
        Bar(open=8.0, high=10.0, low=8.0, close=9.0, volume=100.0),
        Bar(open=10.0, high=12.0, low=10.0, close=11.0, volume=150.0),
        Bar(open=11.0, high=13.0, low=11.0, close=12.0, volume=200.0),
    ]


@pytest.fixture
def ohlcv_frame():
    index = pd.date_range("2024-01-02 09:00", periods=6, freq="5min")
    return pd.DataFrame(
        {
            "open": [10.0, 10.2, 10.1, 10.4, 10.3, 10.6],
            "high": [10.5, 10.6, 10.4, 10.8, 10.7, 11.0],
            "low": [9.8, 10.0, 9.9, 10.2, 10.1, 10.4],
            "close": [10.2, 10.1, 10.3, 10.6, 10.5, 10.9],
            "tick_volume": [120.0, 80.0, 0.0, 200.0, 150.0, 90.0],
        },
        index=index,
    )
