"""Service layer: two-hop composition, result contract, and telemetry.

Services may import from the domain and use_cases layers.
They must never import from commands, output, or infrastructure.
"""
