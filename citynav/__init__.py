"""Top-level package for the city traffic navigator.

The package exposes an in-process API for inspecting a small road
network, changing the traffic status of its roads and asking for the
lowest-cost route between two locations. The terminal menu in
``citynav.cli`` is one front-end built on top of it.
"""
