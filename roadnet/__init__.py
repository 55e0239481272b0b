"""Top-level package for the road network engine.

The package turns a plain-text edge list describing a transportation
network into a dense distance matrix and answers connectivity and
shortest-distance queries over it.
"""

from .services import TransportationNetwork

__all__ = ["TransportationNetwork"]
