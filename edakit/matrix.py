"""Row-major float matrices and a reader for 2-D float32 .npy files."""

from __future__ import annotations

import ast
import random
import struct
from collections.abc import Sequence
from pathlib import Path

_MAGIC = b"\x93NUMPY"
_ENDIAN = {"<f4": "<", ">f4": ">"}


def read_npy(path: str | Path) -> tuple[int, int, list[float]]:
    """Read a 2-D float32 .npy file; return (rows, columns, row-major values)."""
    raw = Path(path).read_bytes()
    if not raw.startswith(_MAGIC) or len(raw) < 10:
        raise ValueError("not a .npy file")
    major = raw[6]
    if major == 1:
        (header_len,) = struct.unpack_from("<H", raw, 8)
        start = 10
    elif major in (2, 3):
        if len(raw) < 12:
            raise ValueError("truncated .npy header")
        (header_len,) = struct.unpack_from("<I", raw, 8)
        start = 12
    else:
        raise ValueError(f"unsupported .npy version {major}")
    text = raw[start : start + header_len].decode("latin-1")
    try:
        header = ast.literal_eval(text.strip())
    except (ValueError, SyntaxError) as error:
        raise ValueError("malformed .npy header") from error
    if not isinstance(header, dict):
        raise ValueError("malformed .npy header")
    endian = _ENDIAN.get(header.get("descr"))
    if endian is None:
        raise ValueError(f"unsupported dtype {header.get('descr')!r}")
    if header.get("fortran_order"):
        raise ValueError("Fortran-ordered arrays are not supported")
    shape = header.get("shape")
    if not (isinstance(shape, tuple) and len(shape) == 2 and all(isinstance(s, int) for s in shape)):
        raise ValueError(f"expected a 2-D shape, got {shape!r}")
    n, dim = shape
    count = n * dim
    offset = start + header_len
    payload = raw[offset : offset + 4 * count]
    if len(payload) < 4 * count:
        raise ValueError("array data is truncated")
    return n, dim, list(struct.unpack(f"{endian}{count}f", payload))


class Matrix:
    """n rows of dim floats stored row by row."""

    def __init__(self, n: int = 0, dim: int = 0, data: Sequence[float] | None = None) -> None:
        if n < 0 or dim < 0:
            raise ValueError("matrix dimensions must not be negative")
        if data is None:
            data = [0.0] * (n * dim)
        elif len(data) != n * dim:
            raise ValueError(f"expected {n * dim} values, got {len(data)}")
        self.n = n
        self.dim = dim
        self.data = [float(v) for v in data]

    @classmethod
    def from_npy(cls, path: str | Path) -> Matrix:
        n, dim, data = read_npy(path)
        return cls(n, dim, data)

    def set_all_random(self, rng: random.Random | None = None) -> None:
        """Fill every entry with a uniform value in [0, 1)."""
        source = random if rng is None else rng
        self.data[:] = [source.random() for _ in self.data]

    def _check(self, index: int) -> None:
        if not 0 <= index < self.n:
            raise IndexError(f"row {index} out of range for {self.n} rows")

    def row(self, index: int) -> list[float]:
        self._check(index)
        start = index * self.dim
        return self.data[start : start + self.dim]

    def set_row(self, index: int, vector: Sequence[float]) -> None:
        self._check(index)
        if len(vector) != self.dim:
            raise ValueError(f"expected {self.dim} values, got {len(vector)}")
        start = index * self.dim
        self.data[start : start + self.dim] = [float(v) for v in vector]

    def render(self) -> str:
        """Rows as [a, b, ...], one per line, inside brackets."""
        rows = "".join(
            "[" + ", ".join(f"{v:g}" for v in self.row(i)) + "],\n" for i in range(self.n)
        )
        return f"[{rows}]\n"