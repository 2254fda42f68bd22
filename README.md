# tcpseq

TCP carries sequence numbers in 32-bit fields. A stream can be far longer
than 2^32 bytes, and each stream starts from its own initial sequence
number (ISN). `tcpseq` converts between the two forms. Everything lives in
the module `tcpseq.wrapping`:

- `WrappingInt32` is an immutable 32-bit sequence number whose arithmetic
  wraps modulo 2^32.
- `wrap(n, isn)` turns a zero-indexed 64-bit absolute sequence number
  into a `WrappingInt32`.
- `unwrap(n, isn, checkpoint)` turns a `WrappingInt32` back into the
  absolute sequence number that wraps to `n` and lies closest to
  `checkpoint`.

## Installation

```
pip install .
```

## Usage

```python
from tcpseq.wrapping import WrappingInt32, wrap, unwrap

isn = WrappingInt32(2**32 - 2)

seqno = wrap(3, isn)
print(seqno)                              # 1

print(unwrap(seqno, isn, checkpoint=0))   # 3

# The checkpoint selects the closest of the candidates that
# differ by multiples of 2**32.
print(unwrap(WrappingInt32(0), WrappingInt32(0), checkpoint=3 * 2**32 + 5))
# 12884901888
```

`WrappingInt32` arithmetic:

```python
a = WrappingInt32(2**32 - 1)
a + 1            # WrappingInt32(raw_value=0)
a - 1            # WrappingInt32(raw_value=4294967294)
WrappingInt32(1) - WrappingInt32(2**32 - 1)   # 2, a signed 32-bit offset
```

- Adding or subtracting an `int` moves the point forwards or backwards,
  with the result wrapped modulo 2^32.
- Subtracting one `WrappingInt32` from another gives the signed 32-bit
  offset (from -2^31 to 2^31 - 1) that leads from the right operand to
  the left one.
- `str()` gives the raw value; the raw value itself is `raw_value`.
- Two values compare equal when their raw values are equal, and they are
  hashable. They have no ordering.

## Errors

- `WrappingInt32` raises `TypeError` when `raw_value` is not an `int`,
  and `ValueError` when it is outside 0 to 2^32 - 1.
- `wrap` raises `ValueError` when `n` is outside 0 to 2^64 - 1.
- `unwrap` raises `ValueError` when `checkpoint` is outside 0 to 2^64 - 1.

## What this package does not do

It only does sequence-number arithmetic. It has no TCP sender, receiver
or connection, no segment parsing, and opens no sockets.

## Running the tests

```
pip install .[test]
pytest
```