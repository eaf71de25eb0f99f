"""Type definitions for HTTP responses."""

from typing import Any, TypeAlias


# Beacon node and explorer bodies are always objects or arrays
JsonResponse: TypeAlias = dict[str, Any] | list[Any]

__all__ = ["JsonResponse"]
