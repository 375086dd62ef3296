import logging
import numbers
from collections import deque
from enum import Enum

import numpy as np
import pandas as pd

from .bar import bars_from_frame
from .errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_WINDOW = 14


class BandDirection(Enum):
    UP = "up"
    DOWN = "down"

    @classmethod
    def _missing_(cls, value):
        # 允许 "UP" / "Down" 之类的写法
        if isinstance(value, str):
            for member in cls:
                if member.value == value.lower():
                    return member
        return None


class RollingVWAP:
    """
    滚动窗口 VWAP (成交量加权均价) 及其标准差轨道

    每来一根 K 线就更新一次，只保留最近 window 根：
        典型价格 tp = (high + low + close) / 3
        VWAP = sum(tp * volume) / sum(volume)
        std_dev = 每根 K 线均价相对当前 VWAP 的总体标准差 (每根权重相同)

    成交量为 0 的 K 线照常进入窗口，但不会单独改变 VWAP；
    窗口内总成交量为 0 时 VWAP 保持上一次的值。
    计算标准差时跳过成交量为 0 的 K 线 (它的均价 0/0 没有意义)。
    """

    def __init__(self, window=DEFAULT_WINDOW):
        if isinstance(window, bool) or not isinstance(window, numbers.Integral):
            raise ConfigurationError(f"window must be an int, got {window!r}")
        if window < 1:
            logger.debug("rejecting VWAP window %d", window)
            raise ConfigurationError(f"window must be >= 1, got {window}")

        window = int(window)
        self._window = window
        self._pv = deque(maxlen=window)
        self._volume = deque(maxlen=window)
        self._vwap = 0.0
        self._std_dev = 0.0

    @property
    def window(self):
        return self._window

    @property
    def vwap(self):
        return self._vwap

    @property
    def std_dev(self):
        return self._std_dev

    @property
    def price_volume_history(self):
        return tuple(self._pv)

    @property
    def volume_history(self):
        return tuple(self._volume)

    @property
    def is_full(self):
        return len(self._volume) == self._window

    def __len__(self):
        return len(self._volume)

    def update(self, bar):
        """喂入一根 K 线，返回最新 VWAP"""
        typical_price = (bar.high + bar.low + bar.close) / 3.0
        volume = bar.volume

        # deque 满了会自动挤掉最老的一根
        self._pv.append(typical_price * volume)
        self._volume.append(volume)

        self._update_vwap()
        if len(self._volume) >= 2:
            self._update_std_dev()

        return self._vwap

    next = update
    __call__ = update

    def _update_vwap(self):
        total_volume = sum(self._volume)
        if total_volume > 0.0:
            self._vwap = sum(self._pv) / total_volume

    def _update_std_dev(self):
        pv = np.fromiter(self._pv, dtype=float, count=len(self._pv))
        volume = np.fromiter(self._volume, dtype=float, count=len(self._volume))

        traded = volume > 0.0
        if traded.sum() < 2:
            self._std_dev = 0.0
            return

        prices = pv[traded] / volume[traded]
        variance = np.mean((prices - self._vwap) ** 2)
        self._std_dev = float(np.sqrt(variance))

    def band(self, offset, direction):
        """VWAP ± offset * std_dev"""
        direction = BandDirection(direction)
        if direction is BandDirection.UP:
            return self._vwap + offset * self._std_dev
        return self._vwap - offset * self._std_dev

    def bands(self, offset):
        """返回 (上轨, 下轨)"""
        return self.band(offset, BandDirection.UP), self.band(offset, BandDirection.DOWN)

    def reset(self):
        self._pv.clear()
        self._volume.clear()
        self._vwap = 0.0
        self._std_dev = 0.0

    def __str__(self):
        return f"VWAP({self._window})"

    def __repr__(self):
        return (
            f"RollingVWAP(window={self._window}, bars={len(self)}, "
            f"vwap={self._vwap!r}, std_dev={self._std_dev!r})"
        )


def add_vwap_bands(df, window=DEFAULT_WINDOW, std_dev=2.0, volume_col="tick_volume"):
    """
    计算滚动 VWAP 及其上下轨道 (逐根 K 线喂给 RollingVWAP)
    """
    indicator = RollingVWAP(window)
    df = df.copy()

    vwaps, devs = [], []
    for bar in bars_from_frame(df, volume_col=volume_col):
        vwaps.append(indicator.update(bar))
        devs.append(indicator.std_dev)

    volume = df[volume_col] if volume_col in df.columns else df["volume"]
    df['tp'] = (df['high'] + df['low'] + df['close']) / 3
    df['pv'] = df['tp'] * volume
    df['vwap'] = pd.Series(vwaps, index=df.index, dtype=float)
    df['std_dev'] = pd.Series(devs, index=df.index, dtype=float)

    # 上下轨道
    df['vwap_upper'] = df['vwap'] + (std_dev * df['std_dev'])
    df['vwap_lower'] = df['vwap'] - (std_dev * df['std_dev'])

    return df
