"""Services layer - Application orchestration.

Available services:
- TransportationNetwork: Loads a network and answers queries over it
"""

from .transportation_network import NO_NETWORK_MESSAGE, TransportationNetwork

__all__ = ["TransportationNetwork", "NO_NETWORK_MESSAGE"]
