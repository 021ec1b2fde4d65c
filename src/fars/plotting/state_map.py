"""
FARS State Accident Map (Functional Core)

Pure function – no file I/O, no side effects.
Input: accident records for one state and year.
Output: plotly.graph_objects.Figure.

Package Location: src/fars/plotting/state_map.py

Base Map:
    A ``Scattergeo`` layer with the North America scope and US state
    outlines (``showsubunits``).  The longitude/latitude axes are clipped
    to the range of the known coordinates, widened by ``_PAD_DEGREES`` on
    each side, so the view is zoomed onto the state being plotted.

Unknown Coordinates:
    Sentinel longitudes/latitudes are masked before anything else (see
    ``analysis/states.py``).  A row with either coordinate unknown is
    left out of the scatter trace; each axis range is taken over that
    axis's known values only.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

import pandas as pd
import plotly.graph_objects as go

from ..analysis.states import coordinate_bounds, mask_unknown_coordinates

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

# One small dot per accident.
_POINT_STYLE: Dict[str, Any] = {
    'color': 'black',
    'symbol': 'circle',
    'size': 3,
    'opacity': 0.8,
}

# Degrees added on each side of the known range; a single point still
# spans 2 * _PAD_DEGREES.
_PAD_DEGREES: float = 0.5

_GEO_STYLE: Dict[str, Any] = {
    'scope': 'north america',
    'projection': {'type': 'mercator'},
    'resolution': 50,
    'showland': True,
    'landcolor': 'white',
    'showcountries': True,
    'countrycolor': 'gray',
    'showsubunits': True,
    'subunitcolor': 'gray',
    'showlakes': False,
}


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def plot_state_map(
    data: pd.DataFrame,
    state: Optional[int] = None,
    year: Any = None,
) -> go.Figure:
    """
    Build a point map of accident locations.

    Args:
        data: Accident records with columns ``LATITUDE`` and ``LONGITUD``
            (degrees, sentinel-encoded unknowns allowed).  ``MONTH`` is
            shown in the hover text when present.
        state: State number, used only in the title.
        year: Year, used only in the title.

    Returns:
        ``plotly.graph_objects.Figure`` ready for ``fig.show()`` or
        ``fig.write_html()``.

    Raises:
        ValueError: If ``LATITUDE`` or ``LONGITUD`` is missing.
    """
    df = mask_unknown_coordinates(data)
    bounds = coordinate_bounds(df)
    points = df.dropna(subset=['LONGITUD', 'LATITUDE'])

    fig = go.Figure()
    fig.add_trace(go.Scattergeo(
        lon=points['LONGITUD'],
        lat=points['LATITUDE'],
        mode='markers',
        marker=dict(
            color=_POINT_STYLE['color'],
            symbol=_POINT_STYLE['symbol'],
            size=_POINT_STYLE['size'],
            opacity=_POINT_STYLE['opacity'],
        ),
        name='Fatal accident',
        customdata=points['MONTH'] if 'MONTH' in points.columns else None,
        hovertemplate=_hover_template('MONTH' in points.columns),
    ))

    geo = dict(_GEO_STYLE)
    if bounds is not None:
        geo['lonaxis'] = dict(range=_padded(bounds['lon']))
        geo['lataxis'] = dict(range=_padded(bounds['lat']))

    fig.update_layout(
        title=_build_title(state, year),
        geo=geo,
        showlegend=False,
        margin=dict(l=10, r=10, t=50, b=10),
        template='plotly_white',
    )
    return fig


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _padded(span: Tuple[float, float]) -> List[float]:
    low, high = span
    return [low - _PAD_DEGREES, high + _PAD_DEGREES]


def _hover_template(with_month: bool) -> str:
    template = 'Lat: %{lat:.4f}<br>Lon: %{lon:.4f}'
    if with_month:
        template += '<br>Month: %{customdata}'
    return template + '<extra></extra>'


def _build_title(state: Optional[int], year: Any) -> str:
    """
    Construct a plot title such as ``'Fatal Accidents – State 30, 2013'``.

    Args:
        state: State number or None.
        year: Year or None.

    Returns:
        Formatted title string.
    """
    parts = []
    if state is not None:
        parts.append(f'State {state}')
    if year is not None:
        parts.append(str(year))
    location = ', '.join(parts)
    return f'Fatal Accidents – {location}' if location else 'Fatal Accidents'
