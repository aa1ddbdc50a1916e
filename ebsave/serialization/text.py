from ..constants import TEXT_PAD_BYTE, FAVORITE_THING_PREFIX,\
     FAVORITE_THING_SUFFIX, FAVORITE_THING_SIZE
from ..errors import UnsupportedCharacterError, TooLongError,\
     MissingPrefixError, MissingSuffixError, TextAfterPaddingError

# plain text part of the font, starting at 0x50. every character
# here is encoded as a single byte; anything else can't be stored.
TEXT_TABLE_START = 0x50
TEXT_TABLE = (
    " !\"#$%&'()*+,-./"
    "0123456789:;<=>?"
    "@ABCDEFGHIJKLMNO"
    "PQRSTUVWXYZ[\\]^_"
    "`abcdefghijklmno"
    "pqrstuvwxyz{|}~"
    )

CHAR_TO_BYTE = {c: TEXT_TABLE_START + i for i, c in enumerate(TEXT_TABLE)}
BYTE_TO_CHAR = {b: c for c, b in CHAR_TO_BYTE.items()}


def encode_text(text, width=None):
    '''
    Encodes text into the game's character set. If a width is given
    the result is padded out to exactly that many bytes, and text
    that won't fit is an error rather than being cut short.
    '''
    rawdata = bytearray()
    for i, char in enumerate(text):
        if char not in CHAR_TO_BYTE:
            raise UnsupportedCharacterError(
                f"Cannot encode character {char!r} at index {i} of {text!r}."
                )
        rawdata.append(CHAR_TO_BYTE[char])

    if width is None:
        return bytes(rawdata)
    elif len(rawdata) > width:
        raise TooLongError(
            f"{text!r} is {len(rawdata)} characters, but only "
            f"{width} will fit."
            )

    rawdata.extend([TEXT_PAD_BYTE]*(width - len(rawdata)))
    return bytes(rawdata)


def decode_text(rawdata):
    chars = []
    for i, byte in enumerate(rawdata):
        if byte == TEXT_PAD_BYTE:
            # everything after the end of the text must be padding
            if any(b != TEXT_PAD_BYTE for b in rawdata[i: ]):
                raise TextAfterPaddingError(
                    f"Found non-padding bytes after the end of the text "
                    f"at index {i}."
                    )
            break
        elif byte not in BYTE_TO_CHAR:
            raise UnsupportedCharacterError(
                f"Cannot decode byte 0x{byte:02X} at index {i}."
                )
        chars.append(BYTE_TO_CHAR[byte])

    return "".join(chars)


def encode_favorite_thing(text, width=FAVORITE_THING_SIZE):
    return encode_text(
        FAVORITE_THING_PREFIX + text + FAVORITE_THING_SUFFIX, width
        )


def decode_favorite_thing(rawdata):
    text = decode_text(rawdata)
    if not text.startswith(FAVORITE_THING_PREFIX):
        raise MissingPrefixError(
            f"Expected favorite thing to start with "
            f"{FAVORITE_THING_PREFIX!r}, but got {text!r}."
            )

    text = text[len(FAVORITE_THING_PREFIX): ]
    if not text.endswith(FAVORITE_THING_SUFFIX):
        raise MissingSuffixError(
            f"Expected favorite thing to end with "
            f"{FAVORITE_THING_SUFFIX!r}, but got {FAVORITE_THING_PREFIX + text!r}."
            )

    if FAVORITE_THING_SUFFIX:
        text = text[: -len(FAVORITE_THING_SUFFIX)]

    return text
