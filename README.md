# reqkit

Small value types with no dependencies, for putting together the parts of an HTTP request.

## Installation

```
pip install reqkit
```

## Modules

- `reqkit.headers`
  - `Header` is a mutable mapping whose keys are compared without regard to ASCII case. A key keeps the spelling it was first stored with. Iteration is ordered by the lower-cased key.
  - `HttpVersion` is an enum with the members `V1X` and `V2`.
- `reqkit.auth`
  - `Authentication(username, password)` holds basic credentials. `Digest` holds digest credentials.
  - Both are frozen dataclasses. Their `auth_string` property gives `"username:password"`.
- `reqkit.forms`
  - `url_encode(value)` percent-encodes every character except `A-Za-z0-9-_.~`.
  - `Parameters` builds a query string from `Parameter(key, value)` items, tuples or a mapping. Keys and values are both encoded. A parameter with an empty value is written as its key alone.
  - `Payload` builds an URL-encoded form body from `Pair(key, value)` items, tuples or a mapping. Keys are written as given and only the values are encoded.
  - Both types have an `add()` method, and `str()` gives the joined text.
- `reqkit.cookies`
  - `Cookies` is a mutable mapping that iterates in name order.
  - `encoded()` returns `name=value; ` for each cookie. Names and values are URL-encoded, except values wrapped in double quotes, which are sent unchanged.
- `reqkit.proxies`
  - `Proxies` maps a protocol to a proxy host.
  - `has(protocol)` tests whether a host is set for a protocol, and `proxies[protocol]` looks one up.
  - When the same protocol is given more than once, the first entry wins.
- `reqkit.multipart`
  - `File(filepath)` and `Buffer(data, filename)` describe the content of a part.
  - `Part.from_value(name, value, content_type="")` accepts a `str`, an `int`, a `File` or a `Buffer`. It sets `is_file` or `is_buffer` to match. Any other value raises `TypeError`.
  - `Multipart` is an ordered, iterable collection of parts, built from `Part` objects or from tuples.
- `reqkit.options`
  - `Body` is a raw body and a subclass of `str`.
  - `LowSpeed(limit, time)` and `MaxRedirects(number_of_redirects)` hold those options.
- `reqkit.errors`
  - `ErrorCode` lists the outcome categories.
  - `CurlCode` lists the numeric transfer result codes.
  - `error_code_for_curl(code)` maps a transfer result code to an `ErrorCode`. `TOO_MANY_REDIRECTS` maps to `OK`. Codes that are not known map to `INTERNAL_ERROR`.

## Example

```python
from reqkit.auth import Authentication
from reqkit.cookies import Cookies
from reqkit.forms import Pair, Parameter, Parameters, Payload
from reqkit.headers import Header

header = Header({"Content-Type": "application/json"})
assert header["content-type"] == "application/json"

params = Parameters([Parameter("hello", "world"), Parameter("key", "value")])
print(str(params))            # hello=world&key=value

payload = Payload([Pair("x", "5")])
print(str(payload))           # x=5

cookies = Cookies({"hello": "world"})
print(cookies.encoded())      # "hello=world; "

password = "password"
auth = Authentication("user", password)
print(auth.auth_string)       # user:password
```

## What it does not do

reqkit only describes requests. It does not open connections, send requests, follow redirects or read responses. There is no session or response type, and no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```