from __future__ import annotations

from typing import List

# SHA-512 as specified in FIPS 180-4
# https://csrc.nist.gov/publications/detail/fips/180/4/final

# hashlib is faster and should be preferred elsewhere. This plain Python
# version keeps the key conversion free of any external primitives.

MASK = (1 << 64) - 1


def _primes(n: int) -> List[int]:
  """The first n primes"""
  found: List[int] = []
  k = 2
  while len(found) < n:
    if all(k % f for f in found if f * f <= k): found.append(k)
    k += 1
  return found

def _iroot(n: int, e: int) -> int:
  """Integer e-th root, rounded down (Newton iteration from above)"""
  x = 1 << -(-n.bit_length() // e)
  while True:
    y = ((e - 1) * x + n // x**(e - 1)) // e
    if y >= x: return x
    x = y

# Constants are the first 64 fractional bits of square roots (IV) and cube roots
# (round constants) of the first primes
IV = tuple(_iroot(k << 128, 2) & MASK for k in _primes(8))
K = tuple(_iroot(k << 192, 3) & MASK for k in _primes(80))
assert IV[0] == 0x6a09e667f3bcc908 and IV[7] == 0x5be0cd19137e2179
assert K[0] == 0x428a2f98d728ae22 and K[79] == 0x6c44198c4a475817


def _rotr(x: int, n: int) -> int: return (x >> n | x << 64 - n) & MASK


def _compress(H: List[int], block: bytes) -> None:
  W = [int.from_bytes(block[i:i + 8], "big") for i in range(0, 128, 8)]
  for t in range(16, 80):
    s0 = _rotr(W[t - 15], 1) ^ _rotr(W[t - 15], 8) ^ W[t - 15] >> 7
    s1 = _rotr(W[t - 2], 19) ^ _rotr(W[t - 2], 61) ^ W[t - 2] >> 6
    W.append((W[t - 16] + s0 + W[t - 7] + s1) & MASK)

  a, b, c, d, e, f, g, h = H
  for t in range(80):
    S1 = _rotr(e, 14) ^ _rotr(e, 18) ^ _rotr(e, 41)
    ch = e & f ^ ~e & g
    t1 = h + S1 + ch + K[t] + W[t]
    S0 = _rotr(a, 28) ^ _rotr(a, 34) ^ _rotr(a, 39)
    maj = a & b ^ a & c ^ b & c
    t2 = S0 + maj
    a, b, c, d, e, f, g, h = (t1 + t2) & MASK, a, b, c, (d + t1) & MASK, e, f, g

  for i, v in enumerate((a, b, c, d, e, f, g, h)):
    H[i] = (H[i] + v) & MASK


class Sha512:
  """Incremental SHA-512 with the same interface as hashlib objects"""
  name = "sha512"
  digest_size = 64
  block_size = 128

  def __init__(self, data=b""):
    self._h = list(IV)
    self._length = 0  # Total message length in bytes
    self._buffer = b""
    if data: self.update(data)

  def update(self, data) -> None:
    data = self._buffer + bytes(data)
    self._length += len(data) - len(self._buffer)
    full = len(data) - len(data) % 128
    for i in range(0, full, 128):
      _compress(self._h, data[i:i + 128])
    self._buffer = data[full:]

  def copy(self) -> Sha512:
    other = Sha512()
    other._h = self._h[:]
    other._length = self._length
    other._buffer = self._buffer
    return other

  def digest(self) -> bytes:
    """Pad and finish a copy, so that more data can still be added to this one."""
    H = self._h[:]
    # 0x80, zeroes up to 112 mod 128, then the 128-bit message length in bits
    tail = self._buffer + b"\x80" + bytes(-(len(self._buffer) + 17) % 128)
    tail += (8 * self._length).to_bytes(16, "big")
    for i in range(0, len(tail), 128):
      _compress(H, tail[i:i + 128])
    return b"".join(v.to_bytes(8, "big") for v in H)

  def hexdigest(self) -> str: return self.digest().hex()


def sha512(data) -> bytes:
  """SHA-512 digest (64 bytes) of data"""
  return Sha512(data).digest()
