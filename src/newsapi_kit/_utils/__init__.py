from ._body_encoders import BodyEncoder, FormURLEncodedBodyEncoder, JSONBodyEncoder
from ._errors import handle_errors
from ._logs import setup_logging
from ._request_builder import PreparedRequest, build_request, merge_headers
from ._request_spec import HTTPHeaders, HttpMethod, Parameters, RequestSpec
from ._sanitize import mask_headers, mask_url

__all__ = [
    "BodyEncoder",
    "FormURLEncodedBodyEncoder",
    "HTTPHeaders",
    "HttpMethod",
    "JSONBodyEncoder",
    "Parameters",
    "PreparedRequest",
    "RequestSpec",
    "build_request",
    "handle_errors",
    "mask_headers",
    "mask_url",
    "merge_headers",
    "setup_logging",
]
