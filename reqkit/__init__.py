"""Value types for HTTP requests: headers, credentials, cookies, forms, multipart parts, proxies, options and error codes."""

__version__ = "0.1.0"

__all__ = [
    "auth",
    "cookies",
    "errors",
    "forms",
    "headers",
    "multipart",
    "options",
    "proxies",
]