import os
import time
from datetime import datetime

import pandas as pd

from .errors import ConfigurationError
from .indicators import add_vwap_bands

# --- 配置区域 ---
CSV_PATH = "data/XAUUSDm_M5.csv"   # 导出的K线文件 (time, open, high, low, close, tick_volume)
SYMBOL = "XAUUSDm"                 # 你的品种
WINDOW = 14                        # VWAP 窗口 (根数)
BAND_OFFSET = 2.0                  # 几倍标准差
POLL_SECONDS = 60                  # 多久重新读一次文件


def load_bars(path=CSV_PATH):
    if not os.path.exists(path):
        raise FileNotFoundError(path)
    try:
        df = pd.read_csv(path)
    except pd.errors.EmptyDataError:
        # 导出程序刚把文件清空，还没写入
        return None
    if df.empty:
        return None

    if 'time' in df.columns:
        # MT5 导出的是秒数，其他来源可能是字符串
        if pd.api.types.is_numeric_dtype(df['time']):
            df['time'] = pd.to_datetime(df['time'], unit='s')
        else:
            df['time'] = pd.to_datetime(df['time'])
        df.set_index('time', inplace=True)

    volume_col = 'tick_volume' if 'tick_volume' in df.columns else 'volume'
    missing = [c for c in ('high', 'low', 'close', volume_col) if c not in df.columns]
    if missing:
        raise ConfigurationError(f"{path} is missing columns: {', '.join(missing)}")

    columns = [c for c in ('open', 'high', 'low', 'close') if c in df.columns]
    return df[columns + [volume_col]]


def check_signal(df, window=WINDOW, offset=BAND_OFFSET):
    """
    看刚收盘的那根 K 线 (iloc[-2]) 是否跑出了 VWAP 轨道
    返回 ("upper" / "lower" / None, 那根K线)
    """
    if df is None or len(df) < 2:
        return None, None

    volume_col = 'tick_volume' if 'tick_volume' in df.columns else 'volume'
    df = add_vwap_bands(df, window=window, std_dev=offset, volume_col=volume_col)

    # 倒数第一根还在跳动，形态没确定
    last_candle = df.iloc[-2]

    if last_candle['close'] > last_candle['vwap_upper']:
        return "upper", last_candle
    if last_candle['close'] < last_candle['vwap_lower']:
        return "lower", last_candle
    return None, last_candle


def main(path=CSV_PATH):
    print(f"📡 VWAP 轨道监控已启动！品种 {SYMBOL} | 文件 {path}")
    print(f"🎯 参数: 窗口={WINDOW}, 轨道={BAND_OFFSET} 倍标准差")
    print("按 Ctrl+C 可以停止程序。\n")

    try:
        while True:
            current_time = datetime.now().strftime("%H:%M:%S")
            try:
                df = load_bars(path)
            except FileNotFoundError:
                print(f"❌ 找不到文件 {path}，{POLL_SECONDS} 秒后重试", end="\r")
                time.sleep(POLL_SECONDS)
                continue
            except pd.errors.ParserError:
                # 文件可能只写了一半
                print(f"❌ 读取 {path} 失败，{POLL_SECONDS} 秒后重试", end="\r")
                time.sleep(POLL_SECONDS)
                continue

            signal, candle = check_signal(df)

            if signal is not None:
                side = "上轨" if signal == "upper" else "下轨"
                print(f"\n" + "="*40)
                print(f"🔥 【{current_time}】 收盘价突破 VWAP {side}！")
                print(f"="*40)
                print(f"   收盘 (Close): {candle['close']:.2f}")
                print(f"   VWAP        : {candle['vwap']:.2f}")
                print(f"   上轨 / 下轨 : {candle['vwap_upper']:.2f} / {candle['vwap_lower']:.2f}")
                print(f"="*40 + "\n")
            elif candle is not None:
                # 为了不刷屏，用 \r 原地刷新
                print(f"⏳ {current_time} 监控中... 暂无信号 (VWAP: {candle['vwap']:.2f})", end="\r")
            else:
                print(f"⏳ {current_time} 数据不足，等待更多K线...", end="\r")

            time.sleep(POLL_SECONDS)

    except KeyboardInterrupt:
        print("\n🛑 监控已停止。")


if __name__ == "__main__":
    main()
