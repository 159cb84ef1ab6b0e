from enum import Enum


class MessageType(str, Enum):
    text = "text"
    voice = "voice"
    video = "video"
