"""Console bank and ATM menus over accounts kept in a local file."""

__version__ = "0.1.0"
__all__ = ["__version__"]