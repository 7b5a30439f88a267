"""Random case-study parameter assignment for team exercises, with console menus and text renderings."""

__version__ = "0.1.0"
__all__ = ["__version__"]