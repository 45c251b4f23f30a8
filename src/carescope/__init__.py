"""CareScope - facility-scoped authorization core for healthcare staffing."""

__version__ = "0.1.0"
