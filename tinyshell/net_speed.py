"""Watching network throughput."""

from __future__ import annotations

import sys
import time
from collections.abc import Sequence

import psutil

DEFAULT_INTERVAL = 1.0


def _totals() -> tuple[int, int]:
    counters = psutil.net_io_counters()
    if counters is None:
        raise RuntimeError("Failed to get network table.")
    return counters.bytes_recv, counters.bytes_sent


def measure_speed(interval: float = DEFAULT_INTERVAL) -> tuple[float, float]:
    """Return (download, upload) in KB/s measured over ``interval`` seconds."""
    in1, out1 = _totals()
    time.sleep(interval)
    in2, out2 = _totals()
    seconds = interval if interval > 0 else 1.0
    download = max(in2 - in1, 0) / 1024.0 / seconds
    upload = max(out2 - out1, 0) / 1024.0 / seconds
    return download, upload


def format_speed(download: float, upload: float) -> str:
    return f"Download Speed: {download:8.2f} KB/s | Upload Speed: {upload:8.2f} KB/s"


def show_net_speed(args: Sequence[str]) -> None:
    """Print the speed every second until interrupted with Ctrl+C."""
    if args:
        print("Usage: net_speed", file=sys.stderr)
        return
    try:
        _totals()
    except RuntimeError as exc:
        print(exc, file=sys.stderr)
        return
    print("Monitoring network speed... (Ctrl+C to stop)")
    try:
        while True:
            try:
                download, upload = measure_speed()
            except RuntimeError as exc:
                print(exc, file=sys.stderr)
                break
            sys.stdout.write("\r" + format_speed(download, upload))
            sys.stdout.flush()
    except KeyboardInterrupt:
        print("\nStopping net_speed...")
    print("\nExiting net_speed.")