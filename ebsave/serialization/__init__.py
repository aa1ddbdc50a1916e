from .save import decode_save, encode_save
