from ext_helpers_lib.net.http import set_headers

__all__ = ["set_headers"]
