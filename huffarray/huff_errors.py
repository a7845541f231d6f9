class HuffmanError(ValueError):
    """Base class for codec failures (malformed input or stream)."""


class InsufficientAlphabet(HuffmanError):
    """Fewer than two distinct symbols; no tree can be built."""


class MalformedHeader(HuffmanError):
    pass


class MalformedPayload(HuffmanError):
    pass


class InvalidSymbolEncoding(HuffmanError):
    pass
