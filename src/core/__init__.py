"""
Core domain models, checksum arithmetic, and codec.

This module contains the foundational building blocks that are independent
of external systems (image files, input files, etc.).
"""
