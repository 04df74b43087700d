"""stockscope library usage example"""

from pathlib import Path

import stockscope
from stockscope.core.services.statistics import date_range_label


def main() -> None:
    source = (Path(__file__).parent / "sample_prices.csv").read_bytes()
    series, stats = stockscope.analyze(source)

    print(f"Range: {date_range_label(series.points)}")
    print(f"Points: {len(series)}")
    print(f"Min: {stats.min:.2f}  Max: {stats.max:.2f}  Mean: {stats.mean:.2f}")
    if stats.period_return_percent is None:
        print("Period return: undefined (first price is zero)")
    else:
        print(f"Period return: {stats.period_return_percent:.2f}%")


if __name__ == "__main__":
    main()
