"""
Header helpers for ``requests`` request objects.
"""

from typing import Mapping, TypeVar, Union

import requests
from requests.structures import CaseInsensitiveDict

from ext_helpers_lib.exceptions import InvalidArgumentError

RequestT = TypeVar("RequestT", bound=Union[requests.Request, requests.PreparedRequest])


def set_headers(request: RequestT, headers: Mapping[str, str]) -> RequestT:
    """
    Replace all headers of *request* with *headers*.

    Parameters
    ----------
    request : requests.Request | requests.PreparedRequest
        Request to modify in place.
    headers : Mapping[str, str]
        New header set.  Existing headers are cleared first.

    Returns
    -------
    requests.Request | requests.PreparedRequest
        The same *request* instance.
    """
    if request is None:
        raise InvalidArgumentError("Request must not be None", param_name="request")
    if headers is None:
        raise InvalidArgumentError("Headers must not be None", param_name="headers")

    request.headers = CaseInsensitiveDict(headers)
    return request
