import sys

from bikeflow.config import load_config
from bikeflow.pipeline import load_traffic_state
from bikeflow.viz.app.single import serve_traffic_map


def main():
  config = load_config(host="0.0.0.0")  # IMPORTANT for Render

  result = load_traffic_state(
      config.stations_source,
      config.trips_source,
      progress=False,
  )
  if not result.ok:
    sys.exit(1)

  serve_traffic_map(
      state=result.state,
      host=config.host,
      port=config.port,
      debug=config.debug,
  )


if __name__ == "__main__":
  main()
