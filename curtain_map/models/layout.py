"""Layout model for the map curtain application."""

import dash_bootstrap_components as dbc
from dash import html, dcc

from curtain_map.components.map import create_map_component
from curtain_map.config.settings import APP_CONFIG
from curtain_map.utils.helper_utils import feature_key, feature_name

LABEL_STYLE = {
    "font-family": 'Open Sans',
    "font-weight": "600",
    "margin-bottom": "5px",
    "margin-top": "10px"
}


def suppression_options(features):
    """Dropdown options for switching individual features off."""
    options = []
    for index, feature in enumerate(features):
        key = feature_key(feature, index)
        options.append({"label": feature_name(feature, default=key), "value": key})
    return options


def create_app_layout(features):
    """
    Creates the application layout: a card with the map and a dropdown used
    to hide individual features regardless of the viewport.

    Args:
        features (list): GeoJSON point features registered with the curtain.

    Returns:
        dash.html.Div: The complete application layout
    """
    suppression_dropdown = dcc.Dropdown(
        id="suppressed-features",
        options=suppression_options(features),
        value=[],
        multi=True,
        searchable=True,
        placeholder="None",
        style={"marginBottom": "15px"},
    )

    map_card = dbc.Card([
        dbc.CardHeader(APP_CONFIG["title"], style={
            "font-family": 'Open Sans',
            "font-weight": "600",
            "font-size": "16px"
        }),
        dbc.CardBody([
            html.Label("Hidden features", style=LABEL_STYLE),
            suppression_dropdown,
            create_map_component(),
        ])
    ], className="mb-2 mt-4")

    return html.Div([
        dbc.Container([map_card], fluid=True)
    ], style={"font-family": "Open Sans, sans-serif"})
