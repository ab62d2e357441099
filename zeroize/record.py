"""A small record with an identifier and data, stored in a byte buffer."""

from __future__ import annotations

import struct

_LAYOUT = struct.Struct("<ii4x")
_DEFAULT_ID = 1234534
_DEFAULT_DATA = 123098


class Object:
    """An identifier and a data value kept in a fixed-size, padded buffer.

    The raw bytes are exposed as ``buffer`` so the whole record can be
    overwritten in place.
    """

    def __init__(self) -> None:
        self.buffer = bytearray(_LAYOUT.size)
        self.reset()

    def reset(self) -> None:
        """Restore the default identifier and data."""
        _LAYOUT.pack_into(self.buffer, 0, _DEFAULT_ID, _DEFAULT_DATA)

    def __len__(self) -> int:
        return len(self.buffer)

    def _write(self, new_id: int, new_data: int) -> None:
        try:
            _LAYOUT.pack_into(self.buffer, 0, new_id, new_data)
        except struct.error as exc:
            raise OverflowError(f"value out of 32-bit range: {exc}") from exc

    @property
    def id(self) -> int:
        return _LAYOUT.unpack_from(self.buffer)[0]

    @id.setter
    def id(self, value: int) -> None:
        self._write(value, self.data)

    @property
    def data(self) -> int:
        return _LAYOUT.unpack_from(self.buffer)[1]

    @data.setter
    def data(self, value: int) -> None:
        self._write(self.id, value)

    def __repr__(self) -> str:
        return f"Object(id={self.id}, data={self.data})"