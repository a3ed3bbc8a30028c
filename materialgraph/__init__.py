"""
materialgraph - visual node editor core for node-based materials.

Main modules:
- material - semantic graph: blocks, connection points, node material
- nodegraph - visual graph, construction and synchronization with the material
"""

__version__ = "0.1.0"
