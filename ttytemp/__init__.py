"""ttytemp - live terminal chart of hardware temperature sensors."""

__version__ = "1.0.0"
