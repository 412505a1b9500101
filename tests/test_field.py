from secrets import token_bytes

import pytest

from ed2curve.field import FieldElement, p

zero, one = FieldElement.zero(), FieldElement.one()


def rand() -> FieldElement:
  return FieldElement.from_int(int.from_bytes(token_bytes(32), "little"))

def enc(n: int) -> bytes:
  return n.to_bytes(32, "little")


def test_constants():
  assert bytes(zero) == bytes(32)
  assert bytes(one) == enc(1)
  assert str(one) == "01" + 31 * "00"
  assert repr(FieldElement.from_int(1234)) == "FieldElement.from_int(1234)"
  assert zero.is_zero and not one.is_zero
  assert FieldElement.from_int(p) == zero
  assert FieldElement.from_int(-1) == zero - one


def test_bytes_roundtrip():
  for _ in range(20):
    b = bytearray(token_bytes(32))
    b[31] &= 0x7F
    assert FieldElement.from_bytes(b).to_bytes() == bytes(b)
  # Largest canonical value
  assert FieldElement.from_bytes(enc(p - 1)).to_bytes() == enc(p - 1)


def test_noncanonical_input():
  # High bit is ignored, values >= p are reduced on output
  assert FieldElement.from_bytes(b"\xff" * 32).to_bytes() == enc(18)
  assert FieldElement.from_bytes(enc(p)).to_bytes() == bytes(32)
  assert FieldElement.from_bytes(enc(p + 1)) == one
  assert FieldElement.from_bytes(enc(1 | 1 << 255)) == one
  assert FieldElement.from_bytes(enc(2**255 - 20)).to_bytes() == enc(p - 1)


def test_limb_schedule():
  assert FieldElement.from_bytes(enc(1 << 26)).limbs == (0, 1, 0, 0, 0, 0, 0, 0, 0, 0)
  assert FieldElement.from_bytes(enc(1 << 51)).limbs == (0, 0, 1, 0, 0, 0, 0, 0, 0, 0)
  assert FieldElement.from_bytes(enc(1 << 230)).limbs == (0,) * 9 + (1,)
  assert FieldElement.from_bytes(enc(2**255 - 1)).limbs == tuple((1 << w) - 1 for w in (26, 25) * 5)
  with pytest.raises(ValueError):
    FieldElement.from_bytes(bytes(31))
  with pytest.raises(ValueError):
    FieldElement((0,) * 9)


def test_negative_limbs():
  assert (zero - one).to_bytes() == enc(p - 1)
  assert (-one).to_bytes() == enc(p - 1)
  x = rand()
  assert x - x == zero
  assert (x - x).to_bytes() == bytes(32)
  assert -(-x) == x
  assert (zero - x - x - x + x + x + x).is_zero


def test_algebra():
  x, y, z = rand(), rand(), rand()
  assert x + zero == x
  assert x * one == x
  assert x * zero == zero
  assert x + y == y + x
  assert x * y == y * x
  assert (x + y) + z == x + (y + z)
  assert (x * y) * z == x * (y * z)
  assert (x + y) * z == x * z + y * z
  assert (x - y) * z == x * z - y * z
  assert x * FieldElement.from_int(2) == x + x
  assert x * FieldElement.from_int(2) != x


def test_vs_int():
  for _ in range(10):
    x, y = rand(), rand()
    a, b = int(x), int(y)
    assert int(x + y) == (a + b) % p
    assert int(x - y) == (a - b) % p
    assert int(x * y) == a * b % p
    assert int(x.square()) == a * a % p
    assert int(x.pow2k(3)) == pow(a, 8, p)
    assert int(x.invert()) == pow(a, p - 2, p)


def test_square():
  for _ in range(10):
    x = rand()
    assert x.square() == x * x
    assert x.square().limbs == (x * x).limbs
  # Unreduced input from additions
  x = rand() + rand() - rand()
  assert x.square() == x * x


def test_product_bounds():
  big = FieldElement.from_bytes(b"\xff" * 32)
  for h in ((big * big).limbs, (big + big).square().limbs, rand().invert().limbs):
    assert all(abs(v) <= 1 << 26 for v in h[::2])
    assert all(abs(v) <= 1 << 25 for v in h[1::2])


def test_invert():
  for _ in range(10):
    x = rand()
    assert (x * x.invert()).to_bytes() == enc(1)
    assert x.invert().invert() == x
  assert one.invert() == one
  assert (zero - one).invert() == zero - one
  # Zero has no inverse but the exponentiation maps it to zero
  assert zero.invert() == zero
  assert FieldElement.from_bytes(enc(p)).invert().is_zero


def test_sign():
  assert not zero.is_negative
  assert one.is_negative
  assert not (-one).is_negative  # p - 1 is even


def test_hash_eq():
  assert len({FieldElement.from_int(i * p) for i in range(3)}) == 1
  assert FieldElement.from_int(5) == FieldElement.from_int(5 + p)
  with pytest.raises(TypeError):
    one == 1
