"""Transfer error codes and their mapping from transport result codes."""

from __future__ import annotations

from enum import Enum, IntEnum, auto


class ErrorCode(Enum):
    """Outcome category of a request."""

    OK = auto()
    CONNECTION_FAILURE = auto()
    EMPTY_RESPONSE = auto()
    HOST_RESOLUTION_FAILURE = auto()
    INTERNAL_ERROR = auto()
    INVALID_URL_FORMAT = auto()
    NETWORK_RECEIVE_ERROR = auto()
    NETWORK_SEND_FAILURE = auto()
    OPERATION_TIMEDOUT = auto()
    PROXY_RESOLUTION_FAILURE = auto()
    SSL_CONNECT_ERROR = auto()
    SSL_LOCAL_CERTIFICATE_ERROR = auto()
    SSL_REMOTE_CERTIFICATE_ERROR = auto()
    SSL_CACERT_ERROR = auto()
    GENERIC_SSL_ERROR = auto()
    UNSUPPORTED_PROTOCOL = auto()


class CurlCode(IntEnum):
    """Result codes reported by the transfer layer."""

    OK = 0
    UNSUPPORTED_PROTOCOL = 1
    URL_MALFORMAT = 3
    COULDNT_RESOLVE_PROXY = 5
    COULDNT_RESOLVE_HOST = 6
    COULDNT_CONNECT = 7
    OPERATION_TIMEDOUT = 28
    SSL_CONNECT_ERROR = 35
    TOO_MANY_REDIRECTS = 47
    GOT_NOTHING = 52
    SSL_ENGINE_NOTFOUND = 53
    SSL_ENGINE_SETFAILED = 54
    SEND_ERROR = 55
    RECV_ERROR = 56
    SSL_CERTPROBLEM = 58
    SSL_CIPHER = 59
    PEER_FAILED_VERIFICATION = 60
    USE_SSL_FAILED = 64
    SSL_ENGINE_INITFAILED = 66
    SSL_CACERT_BADFILE = 77
    SSL_SHUTDOWN_FAILED = 80
    SSL_CRL_BADFILE = 82
    SSL_ISSUER_ERROR = 83


_CURL_TO_ERROR: dict[int, ErrorCode] = {
    CurlCode.OK: ErrorCode.OK,
    CurlCode.UNSUPPORTED_PROTOCOL: ErrorCode.UNSUPPORTED_PROTOCOL,
    CurlCode.URL_MALFORMAT: ErrorCode.INVALID_URL_FORMAT,
    CurlCode.COULDNT_RESOLVE_PROXY: ErrorCode.PROXY_RESOLUTION_FAILURE,
    CurlCode.COULDNT_RESOLVE_HOST: ErrorCode.HOST_RESOLUTION_FAILURE,
    CurlCode.COULDNT_CONNECT: ErrorCode.CONNECTION_FAILURE,
    CurlCode.OPERATION_TIMEDOUT: ErrorCode.OPERATION_TIMEDOUT,
    CurlCode.SSL_CONNECT_ERROR: ErrorCode.SSL_CONNECT_ERROR,
    CurlCode.GOT_NOTHING: ErrorCode.EMPTY_RESPONSE,
    CurlCode.SSL_ENGINE_NOTFOUND: ErrorCode.GENERIC_SSL_ERROR,
    CurlCode.SSL_ENGINE_SETFAILED: ErrorCode.GENERIC_SSL_ERROR,
    CurlCode.SEND_ERROR: ErrorCode.NETWORK_SEND_FAILURE,
    CurlCode.RECV_ERROR: ErrorCode.NETWORK_RECEIVE_ERROR,
    CurlCode.SSL_CERTPROBLEM: ErrorCode.SSL_LOCAL_CERTIFICATE_ERROR,
    CurlCode.SSL_CIPHER: ErrorCode.GENERIC_SSL_ERROR,
    CurlCode.PEER_FAILED_VERIFICATION: ErrorCode.SSL_REMOTE_CERTIFICATE_ERROR,
    CurlCode.USE_SSL_FAILED: ErrorCode.GENERIC_SSL_ERROR,
    CurlCode.SSL_ENGINE_INITFAILED: ErrorCode.GENERIC_SSL_ERROR,
    CurlCode.SSL_CACERT_BADFILE: ErrorCode.SSL_CACERT_ERROR,
    CurlCode.SSL_SHUTDOWN_FAILED: ErrorCode.GENERIC_SSL_ERROR,
    CurlCode.SSL_CRL_BADFILE: ErrorCode.SSL_CACERT_ERROR,
    CurlCode.SSL_ISSUER_ERROR: ErrorCode.SSL_CACERT_ERROR,
    CurlCode.TOO_MANY_REDIRECTS: ErrorCode.OK,
}


def error_code_for_curl(curl_code: int) -> ErrorCode:
    """Return the error category for a transfer result code.

    Codes without a specific category map to ``ErrorCode.INTERNAL_ERROR``.
    """
    return _CURL_TO_ERROR.get(int(curl_code), ErrorCode.INTERNAL_ERROR)