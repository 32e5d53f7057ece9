"""BLAKE3 hashing in the default (unkeyed) mode."""

from __future__ import annotations

import struct

_MASK = 0xFFFFFFFF
_IV = (
    0x6A09E667, 0xBB67AE85, 0x3C6EF372, 0xA54FF53A,
    0x510E527F, 0x9B05688C, 0x1F83D9AB, 0x5BE0CD19,
)
_PERMUTATION = (2, 6, 3, 10, 7, 0, 4, 13, 1, 11, 12, 5, 9, 14, 15, 8)
_CHUNK_START, _CHUNK_END, _PARENT, _ROOT = 1, 2, 4, 8
_BLOCK_LEN = 64
_CHUNK_LEN = 1024
_WORDS = struct.Struct("<16I")

# (input chaining value, block words, counter, block length, flags)
_Output = tuple


def _g(s: list[int], a: int, b: int, c: int, d: int, mx: int, my: int) -> None:
    for x, shift_d, shift_b in ((mx, 16, 12), (my, 8, 7)):
        s[a] = (s[a] + s[b] + x) & _MASK
        v = s[d] ^ s[a]
        s[d] = ((v >> shift_d) | (v << (32 - shift_d))) & _MASK
        s[c] = (s[c] + s[d]) & _MASK
        v = s[b] ^ s[c]
        s[b] = ((v >> shift_b) | (v << (32 - shift_b))) & _MASK


def _compress(cv, words, counter: int, block_len: int, flags: int) -> list[int]:
    s = [*cv, *_IV[:4], counter & _MASK, (counter >> 32) & _MASK, block_len, flags]
    m = list(words)
    for round_number in range(7):
        _g(s, 0, 4, 8, 12, m[0], m[1])
        _g(s, 1, 5, 9, 13, m[2], m[3])
        _g(s, 2, 6, 10, 14, m[4], m[5])
        _g(s, 3, 7, 11, 15, m[6], m[7])
        _g(s, 0, 5, 10, 15, m[8], m[9])
        _g(s, 1, 6, 11, 12, m[10], m[11])
        _g(s, 2, 7, 8, 13, m[12], m[13])
        _g(s, 3, 4, 9, 14, m[14], m[15])
        if round_number < 6:
            m = [m[i] for i in _PERMUTATION]
    return [x ^ y for x, y in zip(s[:8], s[8:])] + [x ^ k for x, k in zip(s[8:], cv)]


def _chaining_value(output: _Output) -> tuple[int, ...]:
    return tuple(_compress(*output)[:8])


def _chunk_output(chunk: bytes, counter: int) -> _Output:
    """Compress all but the last block of a chunk; return the last as an output."""
    blocks = [chunk[i:i + _BLOCK_LEN] for i in range(0, len(chunk), _BLOCK_LEN)] or [b""]
    cv = _IV
    for index, block in enumerate(blocks[:-1]):
        flags = _CHUNK_START if index == 0 else 0
        cv = tuple(_compress(cv, _WORDS.unpack(block), counter, _BLOCK_LEN, flags)[:8])
    last = blocks[-1]
    flags = _CHUNK_END | (_CHUNK_START if len(blocks) == 1 else 0)
    words = _WORDS.unpack(last.ljust(_BLOCK_LEN, b"\0"))
    return (cv, words, counter, len(last), flags)


class Blake3:
    """Incremental BLAKE3 hasher with a hashlib-like interface."""

    name = "blake3"
    block_size = _BLOCK_LEN

    def __init__(self, data: bytes = b"", *, digest_size: int = 32) -> None:
        if digest_size < 1:
            raise ValueError("digest_size must be at least 1")
        self.digest_size = digest_size
        self._buffer = bytearray()
        self._cv_stack: list[tuple[int, ...]] = []
        self._chunks = 0
        self.update(data)

    def update(self, data: bytes) -> None:
        """Feed more bytes to the hasher."""
        self._buffer += memoryview(data).cast("B")
        # The last chunk is kept back until digest(), since it may be the root.
        while len(self._buffer) > _CHUNK_LEN:
            chunk = bytes(self._buffer[:_CHUNK_LEN])
            del self._buffer[:_CHUNK_LEN]
            cv = _chaining_value(_chunk_output(chunk, self._chunks))
            self._chunks += 1
            total = self._chunks
            while total & 1 == 0:
                cv = _chaining_value((_IV, (*self._cv_stack.pop(), *cv), 0, _BLOCK_LEN, _PARENT))
                total >>= 1
            self._cv_stack.append(cv)

    def digest(self) -> bytes:
        """The hash of everything fed so far; the hasher stays usable."""
        output = _chunk_output(bytes(self._buffer), self._chunks)
        for left in reversed(self._cv_stack):
            output = (_IV, (*left, *_chaining_value(output)), 0, _BLOCK_LEN, _PARENT)
        cv, words, _, block_len, flags = output
        out = b"".join(
            _WORDS.pack(*_compress(cv, words, counter, block_len, flags | _ROOT))
            for counter in range(-(-self.digest_size // _BLOCK_LEN))
        )
        return out[:self.digest_size]

    def hexdigest(self) -> str:
        """The digest as lower-case hexadecimal."""
        return self.digest().hex()


def blake3_digest(data: bytes) -> bytes:
    """32-byte BLAKE3 hash of ``data`` in one call."""
    return Blake3(data).digest()