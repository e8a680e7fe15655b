"""Forward-mode automatic differentiation with dual, hyper-dual and higher-order dual numbers."""

__version__ = "0.1.0"

__all__ = ["base", "dual", "dual2", "dual3", "hyperdual", "hyperhyperdual", "linalg"]