"""Numerical and astronomical utility routines: random generators, linear
algebra, least squares, minimisation, polynomial scales, rebinning, the
Planck function and sky positions."""

__version__ = "0.1.0"