from spotctl.http.transport import SpotTransport, build_url, decode_api_error, encode_body
from spotctl.http.versions import APIVersion, all_api_versions, is_known_api_version

__all__ = [
    "APIVersion",
    "SpotTransport",
    "all_api_versions",
    "build_url",
    "decode_api_error",
    "encode_body",
    "is_known_api_version",
]
