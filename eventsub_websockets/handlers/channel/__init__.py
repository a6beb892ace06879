from .moderators import ChannelModerateHandler

__all__ = ["ChannelModerateHandler"]
