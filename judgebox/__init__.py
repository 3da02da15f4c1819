"""Solutions to classic online-judge problems, a small matrix type and an XML limits reader."""

__version__ = "0.1.0"