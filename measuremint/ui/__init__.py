"""PySide6 desktop interface for MeasureMint."""
