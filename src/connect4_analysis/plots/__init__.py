from .chart import (
    plot_time_histogram,
    plot_win_rates,
)

__all__ = [
    "plot_time_histogram",
    "plot_win_rates",
]
