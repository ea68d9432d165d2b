# tagbridge/channel/__init__.py
from tagbridge.channel.process import ChannelState, ParserChannel, request_path
from tagbridge.channel.stream import NO_VALUE, JsonStreamReader

__all__ = [
    "ChannelState",
    "ParserChannel",
    "request_path",
    "JsonStreamReader",
    "NO_VALUE",
]
