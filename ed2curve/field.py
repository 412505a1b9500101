from __future__ import annotations

from typing import Sequence, Tuple

# Field prime
p = 2**255 - 19

# Ten signed limbs in radix 2^25.5: even limbs hold 26 bits, odd limbs 25 bits.
# Limb i is scaled by 2^ceil(25.5 * i).
WIDTHS = (26, 25, 26, 25, 26, 25, 26, 25, 26, 25)
OFFSETS = (0, 26, 51, 77, 102, 128, 153, 179, 204, 230)

Limbs = Tuple[int, int, int, int, int, int, int, int, int, int]


def _carry(h: list, i: int) -> None:
  """Rounded carry from limb i to the next one (limb 9 wraps to 0 times 19)."""
  w = WIDTHS[i]
  c = (h[i] + (1 << w - 1)) >> w
  h[i] -= c << w
  if i == 9: h[0] += 19 * c
  else: h[i + 1] += c


def _reduce(h: list) -> Limbs:
  """Bring the columns of a product down to limbs of 26/25 bits (plus sign)."""
  # Two interleaved chains as in ref10, so that no column can overflow 64 bits
  for i in (0, 4, 1, 5, 2, 6, 3, 7, 4, 8, 9, 0): _carry(h, i)
  return tuple(h)  # type: ignore


def _fold(c: Sequence[int]) -> list:
  """Fold 19 product columns into 10, using 2^255 = 19 (mod p)."""
  return [c[k] + 19 * c[k + 10] if k < 9 else c[k] for k in range(10)]


class FieldElement:
  """An element of the prime field modulo p = 2^255 - 19"""
  __slots__ = ("limbs",)

  def __init__(self, limbs: Sequence[int]):
    if len(limbs) != 10: raise ValueError("A field element has exactly ten limbs")
    self.limbs: Limbs = tuple(limbs)  # type: ignore

  @classmethod
  def zero(cls) -> FieldElement: return cls((0,) * 10)

  @classmethod
  def one(cls) -> FieldElement: return cls((1,) + (0,) * 9)

  @classmethod
  def from_int(cls, n: int) -> FieldElement:
    return cls.from_bytes((n % p).to_bytes(32, "little"))

  @classmethod
  def from_bytes(cls, b) -> FieldElement:
    """Decode 32 little endian bytes, ignoring the highest bit. Not reduced mod p."""
    if len(b) != 32: raise ValueError("Should be exactly 32 bytes")
    n = int.from_bytes(b, "little")
    return cls([n >> o & (1 << w) - 1 for o, w in zip(OFFSETS, WIDTHS)])

  def to_bytes(self) -> bytes:
    """Canonical 32 byte encoding of the value in [0, p), high bit always zero."""
    h = list(_reduce(list(self.limbs)))
    # Quotient estimate: q = 1 iff h >= p, computed without branching
    q = (19 * h[9] + (1 << 24)) >> 25
    for i in range(10): q = (h[i] + q) >> WIDTHS[i]
    h[0] += 19 * q
    # Exact carries (floor), dropping the 2^255 q that overflows limb 9
    for i in range(9):
      c = h[i] >> WIDTHS[i]
      h[i + 1] += c
      h[i] -= c << WIDTHS[i]
    h[9] &= (1 << 25) - 1
    return sum(x << o for x, o in zip(h, OFFSETS)).to_bytes(32, "little")

  def add(self, o: FieldElement) -> FieldElement:
    return FieldElement([a + b for a, b in zip(self.limbs, o.limbs)])

  def sub(self, o: FieldElement) -> FieldElement:
    return FieldElement([a - b for a, b in zip(self.limbs, o.limbs)])

  def neg(self) -> FieldElement:
    return FieldElement([-a for a in self.limbs])

  def mul(self, o: FieldElement) -> FieldElement:
    f, g = self.limbs, o.limbs
    c = [0] * 19
    for i in range(10):
      for j in range(10):
        # Two odd limbs are each half a bit short of their scale
        c[i + j] += f[i] * g[j] * (2 if i & j & 1 else 1)
    return FieldElement(_reduce(_fold(c)))

  def square(self) -> FieldElement:
    f = self.limbs
    c = [0] * 19
    for i in range(10):
      c[2 * i] += f[i] * f[i] * (2 if i & 1 else 1)
      for j in range(i + 1, 10):
        c[i + j] += 2 * f[i] * f[j] * (2 if i & j & 1 else 1)
    return FieldElement(_reduce(_fold(c)))

  def pow2k(self, k: int) -> FieldElement:
    """Square k times"""
    x = self
    for _ in range(k): x = x.square()
    return x

  def invert(self) -> FieldElement:
    """Multiplicative inverse z^(p-2), with zero mapping to zero."""
    z = self
    t0 = z.square()                   # 2
    t1 = z.mul(t0.pow2k(2))           # 9
    t0 = t0.mul(t1)                   # 11
    t1 = t1.mul(t0.square())          # 2^5 - 1
    t1 = t1.pow2k(5).mul(t1)          # 2^10 - 1
    t2 = t1.pow2k(10).mul(t1)         # 2^20 - 1
    t2 = t2.pow2k(20).mul(t2)         # 2^40 - 1
    t1 = t2.pow2k(10).mul(t1)         # 2^50 - 1
    t2 = t1.pow2k(50).mul(t1)         # 2^100 - 1
    t2 = t2.pow2k(100).mul(t2)        # 2^200 - 1
    t1 = t2.pow2k(50).mul(t1)         # 2^250 - 1
    return t1.pow2k(5).mul(t0)        # 2^255 - 21

  @property
  def is_zero(self) -> bool: return not any(self.to_bytes())

  @property
  def is_negative(self) -> bool: return bool(self.to_bytes()[0] & 1)

  __add__ = add
  __sub__ = sub
  __mul__ = mul
  __neg__ = neg

  def __bytes__(self): return self.to_bytes()
  def __int__(self): return int.from_bytes(self.to_bytes(), "little")
  def __hash__(self): return hash(self.to_bytes())
  def __repr__(self): return f"FieldElement.from_int({int(self)})"
  def __str__(self): return self.to_bytes().hex()

  def __eq__(self, other):
    # Note: if we return NotImplemented, Python does object comparison and returns False
    if not isinstance(other, FieldElement): raise TypeError(f"Cannot compare FieldElement with {other!r}")
    return self.to_bytes() == other.to_bytes()
