"""Dash application entry point for the map curtain."""

import logging

import dash_bootstrap_components as dbc
from dash import Dash

from curtain_map.components.map import LeafletMapHost
from curtain_map.config.settings import APP_CONFIG, MAP_CONFIG
from curtain_map.controllers.callbacks import register_callbacks
from curtain_map.models.layout import create_app_layout
from curtain_map.services.data_service import build_curtain, load_point_features

logger = logging.getLogger(__name__)


def create_app(data_path=None):
    """
    Builds the Dash app: loads the point features, registers one marker layer
    per feature with a curtain, and wires map movement to ``Curtain.refresh``.

    Args:
        data_path (str or None): Vector file with point features; defaults to
                                 ``APP_CONFIG["data_path"]``.

    Returns:
        dash.Dash: The configured application.
    """
    data_path = data_path or APP_CONFIG["data_path"]
    features = load_point_features(data_path)

    host = LeafletMapHost(initial_bounds=MAP_CONFIG["bounds"])
    curtain, handles = build_curtain(host, features)

    app = Dash(
        __name__,
        title=APP_CONFIG["title"],
        external_stylesheets=[
            dbc.themes.BOOTSTRAP,
            'https://fonts.googleapis.com/css2?family=Open+Sans:wght@600&display=swap',
        ]
    )
    app.layout = create_app_layout(features)
    register_callbacks(app, curtain, host, handles)

    logger.info(f"Curtain ready with {len(curtain)} features from {data_path}")
    return app


def main():
    logging.basicConfig(level=APP_CONFIG["log_level"])
    app = create_app()
    app.run(debug=APP_CONFIG["debug"])


if __name__ == "__main__":
    main()
