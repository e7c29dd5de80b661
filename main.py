# main.py
import sys

from colorama import Fore, Style

from bikeflow.config import load_config
from bikeflow.pipeline import load_traffic_state
from bikeflow.viz.app.single import serve_traffic_map
from bikeflow.viz.scales import format_time

SUMMARY_TIMES = [-1, 480, 1020]  # any time, 8:00 AM, 5:00 PM
TOP_N = 5


def print_summary(state):
    for t in SUMMARY_TIMES:
        view = state.with_time_filter(t)
        traffic = sorted(view.station_traffic(), key=lambda s: s.total_traffic, reverse=True)
        label = format_time(t) or "any time"

        print(f"\n{Fore.MAGENTA}Busiest stations ({label}):{Style.RESET_ALL}")
        for i, s in enumerate(traffic[:TOP_N], 1):
            print(
                f"{i:02d}. {s.id:>8} | {s.total_traffic:6d} trips "
                f"({s.departures} departures, {s.arrivals} arrivals) {s.name}"
            )


def main():
    config = load_config()

    result = load_traffic_state(config.stations_source, config.trips_source)
    if not result.ok:
        sys.exit(1)

    print_summary(result.state)

    # ---- UI ----
    serve_traffic_map(
        state=result.state,
        host=config.host,
        port=config.port,
        debug=config.debug,
    )


if __name__ == "__main__":
    main()
