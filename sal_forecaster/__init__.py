"""SAL Forecaster — SAL code calculator and daily forecast calendar."""

__version__ = "0.1.0"
