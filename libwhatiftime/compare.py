import numpy as np
import pandas as pd

from .models import DerivedTimes
from .units import STANDARD_SECONDS, TIME_UNIT_OPTIONS


def comparison_frame(derived: DerivedTimes) -> pd.DataFrame:
    """One row per unit: custom length, standard length and their ratio."""
    labels = [label for _, label in TIME_UNIT_OPTIONS]
    custom = np.array([float(derived.unit_table[key]) for key, _ in TIME_UNIT_OPTIONS])
    standard = np.array([float(STANDARD_SECONDS[key]) for key, _ in TIME_UNIT_OPTIONS])
    return pd.DataFrame({
        "Unit": labels,
        "Custom (s)": custom,
        "Standard (s)": standard,
        "Ratio": custom / standard,
    })
