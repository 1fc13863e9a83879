"""Core modules for MeasureMint.

- categories: Conversion categories and their closed unit sets
- converter: pint-backed conversion and display formatting
- history: Session-local conversion records
- session: State container shared by the converter and history screens
- config: Display settings (JSON)
"""
