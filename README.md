# zeroize

Overwrite a writable buffer with a fixed wipe pattern, then check that every
byte was overwritten.

The wipe pattern is the byte `0xA5` (`ZEROIZE_PATTERN`). A buffer can be wiped
only if it is non-empty and its size in bytes is a multiple of 4
(`ZEROIZE_ALIGNMENT`).

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Use

```python
from zeroize.memory import zeroize, is_zeroized, MisalignedSizeError

buffer = bytearray(16)
zeroize(buffer)
assert is_zeroized(buffer)

try:
    zeroize(bytearray(6))
except MisalignedSizeError:
    print("length must be a multiple of 4")
```

`zeroize(buffer)` accepts any object that supports the buffer protocol, such
as `bytearray`, `memoryview` or `array.array`. Sizes are counted in bytes,
whatever the item type of the buffer. It raises:

- `EmptyBufferError` if the buffer is `None` or has no bytes
- `MisalignedSizeError` if its size in bytes is not a multiple of 4
- `TypeError` if the buffer is read-only, such as `bytes`

`EmptyBufferError` and `MisalignedSizeError` are subclasses of
`ZeroizeError`, which is itself a `ValueError`.

`is_zeroized(buffer)` returns `True` only when the buffer is non-empty, its
size is a multiple of 4 bytes, and every byte equals the wipe pattern. It
returns `False` for `None` instead of raising, and works on read-only buffers
too.

### Records

`zeroize.record.Object` is a small record holding a 32-bit signed `id` and
`data` in its own 12-byte storage, exposed as `obj.buffer` (a `bytearray`).
A new record has `id` 1234534 and `data` 123098.

```python
from zeroize.memory import zeroize, is_zeroized
from zeroize.record import Object

obj = Object()
assert len(obj) == 12
zeroize(obj.buffer)
assert is_zeroized(obj.buffer)

obj.reset()            # back to the default id and data
obj.id = 99887733
obj.data = 11223344
```

Assigning a value outside the 32-bit signed range to `id` or `data` raises
`OverflowError`.

## Demo

```
zeroize-demo
```

This creates records, prints their fields, wipes and checks them, then resets
one and gives it new values. It exits with status 1 if a wipe or a check fails.
It takes no options other than `--help`.

## Limits

The wipe overwrites the bytes of the given buffer object only. It cannot reach
copies of the data that Python made elsewhere, such as immutable `bytes` or
`str` objects, so it gives no guarantee that a value has left memory.