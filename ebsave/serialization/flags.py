from ..errors import UnexpectedSlotCountError


def get_flag_data_size(flag_count):
    return (flag_count + 7) // 8


def pack_flags(flags):
    '''
    Packs a sequence of booleans 8 to a byte, with the first flag of
    each group of 8 in bit 0. Unused bits of the last byte are zero.
    '''
    flags = tuple(flags)
    rawdata = bytearray(get_flag_data_size(len(flags)))
    for i, flag in enumerate(flags):
        if flag:
            rawdata[i >> 3] |= 1 << (i & 7)

    return bytes(rawdata)


def unpack_flags(rawdata, flag_count=None):
    if flag_count is None:
        flag_count = len(rawdata) * 8
    elif get_flag_data_size(flag_count) > len(rawdata):
        raise UnexpectedSlotCountError(
            f"Need {get_flag_data_size(flag_count)} bytes to unpack "
            f"{flag_count} flags, but only got {len(rawdata)}."
            )

    return [
        bool(rawdata[i >> 3] & (1 << (i & 7)))
        for i in range(flag_count)
        ]
