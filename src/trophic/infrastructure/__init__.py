"""Infrastructure layer: storage and queue handles, data-access adapters.

This layer depends on stdlib, third-party libs (SQLAlchemy) and the domain.
It must never import from use_cases, services, commands, or output.
"""
