"""Help rendering and documentation linting for Makefile targets."""

__version__ = "0.1.0"
__all__ = ["checks", "colors", "fixer", "lint", "model", "renderer"]