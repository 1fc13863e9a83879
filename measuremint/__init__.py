"""MeasureMint — length and temperature unit converter with session history."""

__app_name__ = "MeasureMint"
__version__ = "1.0.0"
