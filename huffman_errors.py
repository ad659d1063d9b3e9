class HuffmanError(ValueError): # base for every failure raised by the encoder / decoder
    pass


class EmptyInputError(HuffmanError): # nothing to build a tree from
    pass


class InvalidSymbolError(HuffmanError): # byte outside the 7-bit alphabet
    def __init__(self, symbol: int, position: int):
        self.symbol = symbol
        self.position = position
        super().__init__(f"byte {symbol} at position {position} is outside the 7-bit ASCII alphabet")


class FormatError(HuffmanError): # malformed code book text
    pass


class MissingCodeError(HuffmanError): # symbol in the data has no code in the code book
    def __init__(self, symbol: int):
        self.symbol = symbol
        super().__init__(f"no code for symbol {symbol}")


class MalformedStreamError(HuffmanError): # no sentinel bit in the packed data
    pass


class IncompleteCodeError(HuffmanError): # bits left over that match no code
    def __init__(self, bits: str, offset: int):
        self.bits = bits
        self.offset = offset
        super().__init__(f"unmatched bits {bits!r} starting at bit offset {offset}")
