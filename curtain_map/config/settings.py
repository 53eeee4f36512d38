"""Configuration management for the map curtain application."""

import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# App configuration
APP_CONFIG = {
    "title": os.getenv("CURTAIN_TITLE", "Map Curtain"),
    "debug": os.getenv("DEBUG", "False").lower() == "true",
    "log_level": os.getenv("LOG_LEVEL", "INFO"),
    "data_path": os.getenv("CURTAIN_DATA_PATH", "data/points.geojson"),
    "perf_log_every": int(os.getenv("CURTAIN_PERF_LOG_EVERY", "10")),
}

# Map configuration
MAP_CONFIG = {
    "default_center": [56, -96],
    "default_zoom": int(os.getenv("CURTAIN_DEFAULT_ZOOM", "4")),
    "bounds": [[36.676556, -141.001735], [68.110626, -52.620422]],
    "tile_url": os.getenv(
        "CURTAIN_TILE_URL",
        "https://cartodb-basemaps-{s}.global.ssl.fastly.net/light_all/{z}/{x}/{y}.png",
    ),
    "attribution": '&copy; <a href="http://www.openstreetmap.org/copyright">OpenStreetMap</a>, &copy; <a href="https://carto.com/attribution">CARTO</a>',
}
