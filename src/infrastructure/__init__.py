"""Infrastructure Layer.

Adapters that implement domain ports. This layer handles serialization and
returns domain Value Objects.
"""
