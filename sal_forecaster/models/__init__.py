"""Pydantic v2 frozen models: BirthDate, SALCodes, ClientRecord, ForecastDay, ForecastSeries."""
