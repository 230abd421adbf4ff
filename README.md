# rislang

Building blocks for a small scripting language. The package has a source
lexer, resource limits for running scripts, and the helper functions behind
its standard-library modules: base64 and hashing, byte slices, math, string
conversion, JSON, random numbers, UUIDs and time parsing.

The package needs only the Python standard library. It runs on Python 3.10
or later.

## Installation

```
pip install rislang
```

## Lexing source code

`rislang.lexer` turns program text into `Token` objects. These come from
`rislang.tokens`. Each token has a `type` (a `TokenType`), its `literal`
text, and `start` and `end` `Position`s. Positions carry `char`, `line`,
`column`, `line_start`, `value` and `file`, and all of them are zero-indexed.

```python
from rislang.lexer import Lexer, LexerError, tokenize

for tok in tokenize("var x = 0x10 + 2.5 // comment"):
    print(tok.type, repr(tok.literal))

lexer = Lexer("a = 1\nb = 'oops", file="example.rsr")
try:
    for tok in lexer:
        pass
except LexerError as exc:
    print("lex error:", exc)   # unterminated string literal
```

- Newlines come out as `NEWLINE` tokens. Spaces and tabs are skipped.
- `#` and `//` start comments that run to the end of the line. `/* ... */` is
  a block comment.
- Integers can be decimal, hex (`0x`) or binary (`0b`). Decimal integers can
  also be written as floats (`1.5`). A malformed number such as `12ab` or
  `42.foo` raises `LexerError`.
- `"..."` gives a `STRING` token and `'...'` gives an `FSTRING` token. Both
  translate the escapes `\n`, `\r`, `\t` and `\\`. Backticks give a raw
  `BACKTICK` token.
- Keywords (`var`, `func`, `if`, `else`, `return`, `true`, `false`, `nil`,
  `for`, `break`, `import`, `in`) are resolved with
  `rislang.tokens.lookup_identifier`.
- Iterating a `Lexer` yields tokens up to and including the first `EOF`.
  `Lexer.next()` returns one token at a time.
- `Lexer.get_line_text(tok)` returns the full source line holding a token,
  without its newline.
- A partial token, such as an unterminated string, is kept on
  `LexerError.token`.

## Limits

`rislang.limits.StandardLimits` tracks processing cost, HTTP request counts
and buffered read sizes. Each limit defaults to `NO_LIMIT` (`-1`). Going
past a limit raises `LimitsError`.

```python
import io
from rislang.limits import StandardLimits, use_limits, get_limits, track_cost, read_all

limits = StandardLimits(max_cost=100, max_http_request_count=5, max_buffer_size=1024)
with use_limits(limits):
    track_cost(40)                              # counts against the active limits
    data = limits.read_all(io.BytesIO(b"hello"))  # bytes read add to the cost
    print(get_limits().cost)                    # 45

read_all(io.BytesIO(b"abc"), 10)                # b"abc"
```

- `track_http_request()` counts one request.
- `track_http_response(content_length)` rejects responses larger than the
  buffer size.
- The module-level `track_cost` raises `LimitsError` when no limits are
  active.
- `Limits` is the abstract interface to implement for custom limits.

## Standard-library helpers

| Module | Contents |
| --- | --- |
| `rislang.codecs` | `encode`, `decode`, `url_encode` and `url_decode` for base64, with an optional `padding` flag; malformed input raises `Base64Error`. `hash_bytes(data, algorithm)` supports sha256 (the default), sha512, sha1 and md5. |
| `rislang.byteslice` | `ByteSlice`, a mutable byte sequence with indexing, slicing, `+`, `compare`, `clone`, `reversed`, `integers`, `contains`, `contains_any`, `contains_rune`, `count`, `has_prefix`, `has_suffix`, `index`, `index_any`, `index_byte`, `index_rune`, `repeat`, `replace` and `replace_all`. |
| `rislang.mathfuncs` | `absolute`, `sqrt`, `maximum`, `minimum` and `total` (these three take a list or set and return a float), `ceil`, `floor`, `sin`, `cos`, `tan`, `mod`, `log`, `log10`, `log2`, `power`, `pow10`, `is_inf`, `round_half_away`, and the constants `PI` and `E`. |
| `rislang.strconv` | `atoi`, `parse_bool`, `parse_float` and `parse_int(s, base, bit_size)`; bad input raises `NumError` with `func`, `num` and `err` attributes. |
| `rislang.jsonfuncs` | `unmarshal` (every number becomes a float), `marshal(obj, indent=None)` (keys sorted, HTML-sensitive characters escaped, bytes as base64), and `valid`. |
| `rislang.randomness` | `random_float`, `random_int`, `random_intn`, `norm_float`, `exp_float` and `shuffle`, which shuffles a list in place. |
| `rislang.uuids` | `v4()` and `v5(namespace, name)`, which return UUID strings. |
| `rislang.timefuncs` | `now()`, `parse(layout, value)` and `sleep(seconds)`. Layouts are written with the reference time `2006-01-02 15:04:05`, and constants such as `RFC3339`, `ANSIC` and `KITCHEN` are provided. Values without a zone are taken as UTC. A failed parse raises `TimeParseError`. |
| `rislang.errors` | `ArgumentsError`, and the builders `args_error` and `args_range_error`, which return (do not raise) an argument-count error with a standard message. |

```python
from rislang.codecs import encode, decode, hash_bytes
from rislang.byteslice import ByteSlice
from rislang.strconv import parse_int
from rislang.timefuncs import parse, RFC3339

encode(b"foo")                  # "Zm9v"
encode(b"f", padding=False)     # "Zg"
decode("Zm9vYmFy")              # b"foobar"
hash_bytes(b"abc", "md5").hex()

buf = ByteSlice(b"hello world")
buf.index(b"world")             # 6
buf.replace_all(b"o", b"0") == b"hell0 w0rld"   # True

parse_int("0x1f", 0, 64)        # 31
parse(RFC3339, "2024-05-01T12:30:00Z")
```

## What this package does not do

The package tokenizes source text, but it does not parse or run programs. It
has no interpreter, no command-line tool and no interactive shell. The limits
module keeps count of HTTP requests and response sizes, but the package makes
no network requests itself. It also has no file-system or environment
functions.

## Running the tests

```
pip install -e ".[test]"
pytest
```