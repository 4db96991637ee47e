"""
Reference signing vectors.

Every case shares the defaults below; expected signatures were computed
independently of this library.
"""

CLIENT_TOKEN = "akab-client-token-xxx-xxxxxxxxxxxxxxxx"
CLIENT_SECRET = "SOMESECRET"
ACCESS_TOKEN = "akab-access-token-xxx-xxxxxxxxxxxxxxxx"
HOST = "akaa-baseurl-xxxxxxxxxxx-xxxxxxxxxxxxx.luna.akamaiapis.net"
BASE_URL = f"https://{HOST}/"
HEADERS_TO_SIGN = ["X-Test1", "X-Test2", "X-Test3"]
NONCE = "nonce-xx-xxxx-xxxx-xxxx-xxxxxxxxxxxx"
TIMESTAMP = "20140321T19:34:21+0000"
MAX_BODY = 2048

SIGNING_KEY = "9KXfMHEbSZwBAOXViKXP54k7j1ReYdSbsWN8/IezYo4="

AUTH_PREFIX = (
    f"EG1-HMAC-SHA256 client_token={CLIENT_TOKEN};access_token={ACCESS_TOKEN};"
    f"timestamp={TIMESTAMP};nonce={NONCE};"
)

TESTS = [
    {
        "name": "simple GET",
        "request": {"method": "GET", "path": "/"},
        "signature": "MY1mmxCqlyWh8XrFw3kxSlb6/AxJUXsjtZm6xqzmkjE=",
    },
    {
        "name": "GET with querystring",
        "request": {"method": "GET", "path": "/testapi/v1/t1", "query": "p1=1&p2=2"},
        "signature": "2OE0t+0nA2+uZGgDC8ekEWvKnHQutcz8vBpaU3E3jdk=",
    },
    {
        "name": "GET ignores body",
        "request": {"method": "GET", "path": "/", "body": "datadatadatadatadatadatadatadata"},
        "signature": "MY1mmxCqlyWh8XrFw3kxSlb6/AxJUXsjtZm6xqzmkjE=",
    },
    {
        "name": "POST inside limit",
        "request": {
            "method": "POST",
            "path": "/testapi/v1/t3",
            "body": "datadatadatadatadatadatadatadata",
        },
        "signature": "7ThnM/AFQUAbNqNzb8MIbZhpEzzubibNXIlfN8WZA50=",
    },
    {
        "name": "POST too large",
        "request": {"method": "POST", "path": "/testapi/v1/t3", "body": "x" * 3000},
        "signature": "bzm2y1b1tKPYZwliVV+2EHP+5caRfzLGKh70LwNpDh8=",
    },
    {
        "name": "POST length equals max_body",
        "request": {"method": "POST", "path": "/testapi/v1/t3", "body": "x" * 2048},
        "signature": "bzm2y1b1tKPYZwliVV+2EHP+5caRfzLGKh70LwNpDh8=",
    },
    {
        "name": "POST empty body",
        "request": {"method": "POST", "path": "/testapi/v1/t6", "body": ""},
        "signature": "IQ6IrV55qsH3mFDdADwHgNgZDNdQOTkG/ZfsSYklqkk=",
    },
    {
        "name": "PUT with body",
        "request": {"method": "PUT", "path": "/testapi/v1/t6", "body": '{"key":"value"}'},
        "signature": "rAoVmaz3aKbmK9GHygsp/Vcsbl2Jw5DnUlarHCqiIjA=",
    },
    {
        "name": "DELETE",
        "request": {"method": "DELETE", "path": "/testapi/v1/t7"},
        "signature": "zlrxxfwdQSUJrI1kMGZT1y9vJZmZxelt1BG3BzE4bA8=",
    },
    {
        "name": "HEAD",
        "request": {"method": "HEAD", "path": "/testapi/v1/t7"},
        "signature": "R5hT45AgRCLyNjYK+PBkVjsKPev26dWE4lYkpgk35QI=",
    },
    {
        "name": "simple header",
        "request": {
            "method": "GET",
            "path": "/testapi/v1/t4",
            "headers": {"X-Test1": "test-simple-header"},
        },
        "signature": "LEDdvrAW6q0LLg7KcLZnIBJvVBkLFdWRR/D2vZZRexc=",
    },
    {
        "name": "header with extra whitespace",
        "request": {
            "method": "GET",
            "path": "/testapi/v1/t4",
            "headers": {"X-Test1": "  first    second \t third  "},
        },
        "signature": "S1ob2FTh1JrMTby4O6yRd3NkYgVGidtXn2dPVuQ5nYo=",
    },
    {
        "name": "multiple headers out of order",
        "request": {
            "method": "GET",
            "path": "/testapi/v1/t5",
            "headers": {"X-Test2": "two", "x-TEST1": "one"},
        },
        "signature": "8tmW1qYfvjRfdBJkSX7LwdNvE1YLlet9/B90qkxeEYo=",
    },
    {
        "name": "unsigned header",
        "request": {
            "method": "GET",
            "path": "/testapi/v1/t5",
            "headers": {"X-Extra": "not signed"},
        },
        "signature": "bmVFN0UN2iyY4ZP811RTUCy3FDiX6HhGa7U7KNF13qI=",
    },
    {
        "name": "empty header list",
        "request": {
            "method": "GET",
            "path": "/testapi/v1/t5",
            "headers": {"X-Test1": []},
        },
        "signature": "bmVFN0UN2iyY4ZP811RTUCy3FDiX6HhGa7U7KNF13qI=",
    },
    {
        "name": "header list",
        "request": {
            "method": "GET",
            "path": "/testapi/v1/t5",
            "headers": {"X-Test1": ["Value1", "value2"]},
        },
        "signature": "E1P+Jsctir4OLSIHEUcfesWyMNNO4fSRnwt5+Q+CzNE=",
    },
    {
        "name": "query with plus encoded spaces",
        "request": {"method": "GET", "path": "/testapi/v1/t8", "query": "q=string+with+spaces"},
        "signature": "94wgoKcvm/wub48C5i3hj+ggArupwrZ2aBKwFdIbkaM=",
    },
    {
        "name": "query with percent encoded spaces",
        "request": {"method": "GET", "path": "/testapi/v1/t8", "query": "q=string%20with%20spaces"},
        "signature": "94wgoKcvm/wub48C5i3hj+ggArupwrZ2aBKwFdIbkaM=",
    },
]


def expected_authorization(test):
    return f"{AUTH_PREFIX}signature={test['signature']}"


# Published upstream EdgeGrid test data, signed with its own client secret.
UPSTREAM_CLIENT_SECRET = "xxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxx="

UPSTREAM_TESTS = [
    {
        "name": "simple GET",
        "request": {"method": "GET", "path": "/"},
        "signature": "tL+y4hxyHxgWVD30X3pWnGKHcPzmrIF+LThiAOhMxYU=",
    },
    {
        "name": "GET with querystring",
        "request": {"method": "GET", "path": "/testapi/v1/t1", "query": "p1=1&p2=2"},
        "signature": "hKDH1UlnQySSHjvIcZpDMbQHihTQ0XyVAKZaApabdeA=",
    },
]
