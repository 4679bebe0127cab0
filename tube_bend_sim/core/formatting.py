"""Formatting utilities for measurements and display."""

from __future__ import annotations

import math


def format_length(value: float, decimals: int = 1) -> str:
    """
    Format a length in millimetres.

    Args:
        value: Length in mm
        decimals: Number of decimal places

    Returns:
        Formatted string like "400.0 mm"
        Returns "ERROR" if value is NaN or infinity
    """
    # Guard against invalid float values
    if math.isnan(value) or math.isinf(value):
        return "ERROR"
    return f"{value:.{decimals}f} mm"


def format_angle(value: float, decimals: int = 1) -> str:
    """
    Format an angle in degrees.

    Returns:
        Formatted string like "90.0°", or "ERROR" for NaN/infinity
    """
    if math.isnan(value) or math.isinf(value):
        return "ERROR"
    return f"{value:.{decimals}f}°"
