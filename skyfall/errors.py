class SkyfallError(Exception):
    """Base class for everything skyfall raises on purpose."""


class ChannelClosed(SkyfallError):
    pass


class TerminalError(SkyfallError):
    pass


class InputDecodeError(SkyfallError):
    pass


class RenderError(SkyfallError):
    pass


class ConfigError(SkyfallError):
    pass
