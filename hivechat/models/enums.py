from enum import Enum


class ApiStyle(str, Enum):
    openai = "openai"
    claude = "claude"
    gemini = "gemini"


class ProviderType(str, Enum):
    default = "default"
    custom = "custom"


class ModelType(str, Enum):
    default = "default"
    custom = "custom"


class AvatarType(str, Enum):
    emoji = "emoji"
    url = "url"
    none = "none"


class HistoryType(str, Enum):
    all = "all"
    count = "count"
    none = "none"


class MessageType(str, Enum):
    text = "text"
    image = "image"
    error = "error"
    break_ = "break"


class GroupModelType(str, Enum):
    all = "all"
    specific = "specific"
