from .message_router import MessageRouter

__all__ = ["MessageRouter"]
