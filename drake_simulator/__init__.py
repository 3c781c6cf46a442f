"""Drake Equation Simulator."""

__version__ = "0.1.0"
