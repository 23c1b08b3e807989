"""Orchestration layer: one hop of the food cycle over the data-access layer.

Use cases depend only on the domain ports. They must never import from
infrastructure, services, commands, or output.
"""
