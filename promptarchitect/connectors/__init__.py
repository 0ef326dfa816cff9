"""
Prompt Architect Connectors
- adapters: per-model polish (claude, gpt, gemini)
- service_client: HTTP client for a running service
"""

from .adapters import (
    ModelAdapter, ClaudeAdapter, GPTAdapter, GeminiAdapter, PassthroughAdapter,
    ADAPTERS, get_adapter, list_adapters
)
from .service_client import ServiceClient, ServiceUnavailable

__all__ = [
    # Adapters
    "ModelAdapter", "ClaudeAdapter", "GPTAdapter", "GeminiAdapter", "PassthroughAdapter",
    "ADAPTERS", "get_adapter", "list_adapters",
    # Remote service
    "ServiceClient", "ServiceUnavailable",
]
