import json
import pathlib
import yaml

METADATA_EXTENSIONS = ("yaml", "yml", "json")


def load_metadata(filepath):
    filepath    = pathlib.Path(filepath)
    asset_type  = filepath.suffix.strip(".").lower()
    if asset_type in ("yaml", "yml"):
        with filepath.open() as f:
            metadata = yaml.safe_load(f)
    elif asset_type == "json":
        with filepath.open() as f:
            metadata = json.load(f)
    else:
        raise ValueError("Unknown metadata asset type '%s'" % asset_type)

    if not isinstance(metadata, dict):
        raise ValueError(
            f"Expected dict at top level of metadata, but got {type(metadata)}."
            )
    return metadata


def dump_metadata(metadata, filepath, overwrite=False):
    filepath    = pathlib.Path(filepath)
    asset_type  = filepath.suffix.strip(".").lower()
    if filepath.is_file() and not overwrite:
        return False
    elif asset_type not in METADATA_EXTENSIONS:
        raise ValueError("Unknown metadata asset type '%s'" % asset_type)

    filepath.parent.mkdir(parents=True, exist_ok=True)
    with filepath.open('w') as f:
        if asset_type == "json":
            json.dump(metadata, f, sort_keys=True, indent=2)
        else:
            yaml.safe_dump(metadata, f, sort_keys=False)

    return True
