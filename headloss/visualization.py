"""
Visualization of the pressure loss profile using Plotly.

Charts use the plotly_white theme and show values in the display units of
the selected unit system.
"""

import numpy as np
import pandas as pd
import plotly.graph_objects as go

from .calculator import CalculationResult
from .formatting import format_pressure_axis, regime_label
from .units import DisplayQuantity, UnitSystem, display_unit, display_value


def profile_dataframe(result: CalculationResult, system: UnitSystem) -> pd.DataFrame:
    """
    Pressure profile as a DataFrame in display units.

    Args:
        result: Calculation result (SI)
        system: Unit system to display in

    Returns:
        DataFrame with a distance column and a pressure loss column, the
        unit of each in its header
    """
    length_unit = display_unit(system, DisplayQuantity.LENGTH)
    pressure_unit = display_unit(system, DisplayQuantity.PRESSURE_PA)

    return pd.DataFrame({
        f'Distance ({length_unit})': [
            display_value(p.distance, system, DisplayQuantity.LENGTH)
            for p in result.pressure_profile
        ],
        f'Pressure Loss ({pressure_unit})': [
            display_value(p.pressure_loss, system, DisplayQuantity.PRESSURE_PA)
            for p in result.pressure_profile
        ],
    })


def pressure_profile_figure(result: CalculationResult, system: UnitSystem) -> go.Figure:
    """
    Create interactive pressure loss vs distance chart.

    Args:
        result: Calculation result (SI)
        system: Unit system to display in

    Returns:
        Plotly Figure object
    """
    df = profile_dataframe(result, system)
    distance_col, pressure_col = df.columns
    length_unit = display_unit(system, DisplayQuantity.LENGTH)
    pressure_unit = display_unit(system, DisplayQuantity.PRESSURE_PA)

    fig = go.Figure()

    # Pressure loss runs along x, distance along the pipe up the y axis
    fig.add_trace(go.Scatter(
        x=df[pressure_col],
        y=df[distance_col],
        mode='lines',
        name='Pressure Loss',
        line=dict(color='#0284c7', width=3),
        hovertemplate=(
            f'Pressure Loss: %{{x:.2f}} {pressure_unit}<br>'
            f'Distance: %{{y:.2f}} {length_unit}<extra></extra>'
        ),
    ))

    max_loss = float(df[pressure_col].max())
    tick_values = np.linspace(0, max_loss, 6) if max_loss > 0 else np.array([0.0])

    fig.update_layout(
        template='plotly_white',
        title=(
            f'Pressure Loss Along the Pipe<br>'
            f'Regime: {regime_label(result.flow_regime)}, '
            f'Re = {result.reynolds_number:,.0f}'
        ),
        xaxis_title=f'Pressure Loss ({pressure_unit})',
        yaxis_title=f'Distance ({length_unit})',
        showlegend=False,
        height=500,
        xaxis=dict(
            gridcolor='lightgray',
            tickvals=tick_values.tolist(),
            ticktext=[format_pressure_axis(v, system) for v in tick_values],
        ),
        yaxis=dict(gridcolor='lightgray'),
    )

    return fig
