"""queryspec Ports: collaborator interfaces consumed by the specification core."""

from queryspec.ports.outbound import HydrationMode, QueryBuilderPort, QueryPort

__all__ = ["HydrationMode", "QueryBuilderPort", "QueryPort"]
