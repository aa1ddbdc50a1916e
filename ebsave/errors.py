class SaveCodecError(ValueError):
    '''
    Base class for everything that can go wrong turning a save block
    into a SaveRecord or back. field and offset point at the part of
    the block that couldn't be handled, when that's known.
    '''
    def __init__(self, message, field=None, offset=None):
        super().__init__(message)
        self.message = message
        self.field   = field
        self.offset  = offset

    def locate(self, field, offset):
        # innermost location wins, since it's the most specific
        if self.field is None:
            self.field  = field
            self.offset = offset

    def __str__(self):
        if self.field is None:
            return self.message
        elif self.offset is None:
            return f"{self.field}: {self.message}"
        return f"{self.field} (offset 0x{self.offset:03X}): {self.message}"


class EncodingError(SaveCodecError):
    pass


class UnsupportedCharacterError(EncodingError):
    pass


class TooLongError(EncodingError):
    pass


class MissingPrefixError(EncodingError):
    pass


class MissingSuffixError(EncodingError):
    pass


class TextAfterPaddingError(EncodingError):
    pass


class LayoutError(SaveCodecError):
    pass


class UnexpectedStatCountError(LayoutError):
    pass


class UnexpectedStatKindError(LayoutError):
    pass


class UnexpectedSlotCountError(LayoutError):
    pass


class TruncatedBufferError(LayoutError):
    pass


class TrailingDataError(LayoutError):
    pass


class InvalidEnumValueError(LayoutError):
    pass


class FieldRangeError(LayoutError):
    pass
