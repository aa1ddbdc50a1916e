from supyr_struct.buffer import BytearrayBuffer, BytesBuffer

# seeking is broken in supyr(can't seek to start). blocks get built
# straight from bytes objects, which get wrapped in a BytesBuffer.
BytesBuffer.seek = BytearrayBuffer.seek
