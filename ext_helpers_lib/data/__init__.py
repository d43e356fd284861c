from ext_helpers_lib.data.connection_string import (
    ConnectionStringBuilder,
    strip_password_from_connection_string,
)

__all__ = ["ConnectionStringBuilder", "strip_password_from_connection_string"]
