"""Infrastructure layer — filesystem access and skill source discovery.

This layer depends only on the stdlib.
It must never import from domain, services, commands, or output.
The service layer bridges between domain models and infrastructure.
"""
