from ext_helpers_lib.serialization.json_utils import (
    to_json,
    serialize_to_json_stream,
    deserialize,
    is_executable,
)

__all__ = ["to_json", "serialize_to_json_stream", "deserialize", "is_executable"]
