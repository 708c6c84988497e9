"""
Core domain models, numeric primitives, contracts and events.

This module contains the foundational building blocks of the time conductor
that are independent of views, clocks and time-system catalogs.
"""
