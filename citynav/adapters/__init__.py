"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces:
- Graph storage (in-memory store, CSV seed loader)
- Routing (Dijkstra)
- Rendering (ANSI terminal)
"""
