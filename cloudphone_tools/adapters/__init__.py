"""Tool Adapters.

Available adapters:
- cloudphone: CloudPhone device API (echo, device connection link)
"""

__all__ = ["cloudphone"]
