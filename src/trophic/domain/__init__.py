"""Domain layer: identities, entities, errors, and capability interfaces.

This layer depends only on the standard library.
It must never import from use_cases, services, infrastructure, commands, or config.
"""
