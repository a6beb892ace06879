from .channel_moderate import ChannelModerateHandler

__all__ = ["ChannelModerateHandler"]
