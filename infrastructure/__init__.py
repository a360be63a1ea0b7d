"""Infrastructure layer — operational concerns for the practice-plan service.

Modules:
    metrics     Prometheus metrics registry.
"""
