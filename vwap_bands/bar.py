import logging
from dataclasses import dataclass
from typing import Any, Optional

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

PRICE_COLUMNS = ("high", "low", "close")


@dataclass(frozen=True)
class Bar:
    """一根 K 线。指标只读取 high / low / close / volume"""

    high: float
    low: float
    close: float
    volume: float
    open: Optional[float] = None
    time: Optional[Any] = None


def bars_from_frame(df, volume_col="tick_volume"):
    """
    把 OHLCV 表格逐行转换成 Bar (按行顺序，不做时间排序检查)

    MT5 导出的成交量列叫 tick_volume；如果没有这一列但有 volume，就用 volume。
    """
    if volume_col not in df.columns and "volume" in df.columns:
        logger.debug("column %r not found, falling back to 'volume'", volume_col)
        volume_col = "volume"

    missing = [c for c in PRICE_COLUMNS + (volume_col,) if c not in df.columns]
    if missing:
        raise ConfigurationError(f"frame is missing columns: {', '.join(missing)}")

    has_open = "open" in df.columns
    for idx, row in df.iterrows():
        yield Bar(
            high=float(row["high"]),
            low=float(row["low"]),
            close=float(row["close"]),
            volume=float(row[volume_col]),
            open=float(row["open"]) if has_open else None,
            time=idx,
        )
