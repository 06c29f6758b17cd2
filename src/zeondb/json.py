''' Wrapper module to select the most performant available library to handle
    the equivalent of :func:`json.loads` and :func:`json.dumps`.
'''

# The business about conditionally importing the libraries is intended to
# avoid importing the slower library when the faster one is available.

msgspec = None
orjson = None

try:
    import msgspec
except ImportError:
    import orjson


# The msgspec 'encode' operation returns bytes, as does orjson.dumps. Both
# preserve dictionary insertion order and escape control characters inside
# strings, which keeps an encoded value on a single line.

if msgspec is not None:
    encoder = msgspec.json.Encoder()
    decoder = msgspec.json.Decoder()
    dumps = encoder.encode
    loads = decoder.decode
    DecodeError = msgspec.DecodeError
else:
    dumps = orjson.dumps
    loads = orjson.loads
    DecodeError = orjson.JSONDecodeError


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
