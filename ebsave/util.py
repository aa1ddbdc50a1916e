BYTE_VALUES_TO_SET_BIT_COUNT = tuple(
    sum(bool(i & (1<<b)) for b in range(8))
    for i in range(256)
    )


def count_set_bits(byte_data):
    return sum(map(BYTE_VALUES_TO_SET_BIT_COUNT.__getitem__, byte_data))
