import pathlib
import shutil

from .constants import SAVE_LENGTH
from .serialization import decode_save, encode_save
from .metadata import load_metadata, dump_metadata,\
     save_record_to_meta, meta_to_save_record


class SaveEditor:
    filepath = ""
    # save slot n is read from/written to offset n*SAVE_LENGTH. a file
    # holding a single save block is just slot 0.
    slot = 0

    backup = True
    overwrite = False
    metadata_format = "yaml"

    def __init__(self, **kwargs):
        # simple initialization setup where kwargs are
        # copied into the attributes of this new class
        for k, v in kwargs.items():
            setattr(self, k, v)

    @property
    def slot_offset(self):
        if not isinstance(self.slot, int) or self.slot < 0:
            raise ValueError(f"Invalid save slot '{self.slot}'.")
        return self.slot * SAVE_LENGTH

    def get_metadata_filepath(self):
        filepath = pathlib.Path(self.filepath)
        return filepath.with_name(
            f"{filepath.stem}.slot{self.slot}.{self.metadata_format}"
            )

    def read_slot_data(self):
        with pathlib.Path(self.filepath).open("rb") as f:
            f.seek(self.slot_offset)
            return f.read(SAVE_LENGTH)

    def load_record(self):
        return decode_save(self.read_slot_data())

    def save_record(self, record, filepath=None):
        # serialize first, so a record that can't be written
        # never touches what's already on disk
        rawdata  = encode_save(record)
        filepath = pathlib.Path(filepath or self.filepath)
        start    = self.slot_offset
        end      = start + SAVE_LENGTH

        file_data = bytearray()
        if filepath.is_file():
            file_data = bytearray(filepath.read_bytes())
            if self.backup:
                shutil.copy2(filepath, filepath.with_name(filepath.name + ".bak"))

        if len(file_data) < end:
            file_data.extend(bytes(end - len(file_data)))

        file_data[start: end] = rawdata
        filepath.write_bytes(file_data)
        return filepath

    def export_metadata(self, filepath=None):
        filepath = pathlib.Path(filepath or self.get_metadata_filepath())
        metadata = save_record_to_meta(self.load_record())
        if dump_metadata(metadata, filepath, self.overwrite):
            return filepath
        return None

    def import_metadata(self, filepath=None):
        filepath = pathlib.Path(filepath or self.get_metadata_filepath())
        record   = meta_to_save_record(load_metadata(filepath))
        self.save_record(record)
        return record
