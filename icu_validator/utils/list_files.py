import os

from icu_validator.const import JSON_SUFFIX


def list_json_files(path: str) -> list[str]:
    """Get the JSON files of a directory as paths resolved against it"""
    names = sorted(name for name in os.listdir(path) if name.endswith(JSON_SUFFIX))
    return [os.path.abspath(os.path.join(path, name)) for name in names]
