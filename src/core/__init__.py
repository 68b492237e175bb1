"""
Core domain models, mathematical primitives, and input contracts.

This module contains the building blocks of the objective that are
independent of data loading and reporting collaborators.
"""
