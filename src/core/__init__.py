"""
Core domain models, mathematical primitives, and invariants.

This module contains the engineering-notation number type and the pure
normalization/alignment math it is built on.
"""
