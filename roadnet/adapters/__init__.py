"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the graph engine to:
- Edge-list storage (text files)
- Console rendering (fixed-width tables)
"""
