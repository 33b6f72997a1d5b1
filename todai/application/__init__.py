"""Application layer: DTOs, repository ports, validation and use cases.

Depends only on domain and protocol definitions. Infrastructure
implements the interfaces (task repository).
"""
