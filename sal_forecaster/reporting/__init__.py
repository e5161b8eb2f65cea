"""
sal_forecaster.reporting — Terminal formatting and file export.

Modules:
  formatters — ASCII tables for Typer CLI commands.
  export     — CSV/JSON export helpers and the JSON series envelope.
"""
