import logging

from .field import FieldElement
from .sha512 import sha512
from .util import clamp, pkbytes, seedbytes, sigbytes, sign_bit

log = logging.getLogger(__name__)

# Ed25519 (RFC 8032) keys converted to X25519 (RFC 7748), compatible with
# libsodium's crypto_sign_ed25519_*_to_curve25519 functions.


def ed25519_pk_to_curve25519(pk) -> bytes:
  """
  Convert a compressed Ed25519 public key into a Curve25519 public key.

  The Montgomery u coordinate is (1 + y) / (1 - y). The sign of x stored in
  the high bit of pk is dropped because u does not depend on it. Input is not
  validated as a curve point. The Edwards identity (y = 1) gives u = 0.
  """
  y = FieldElement.from_bytes(pkbytes(pk))
  one = FieldElement.one()
  u = (one + y) * (one - y).invert()
  ret = u.to_bytes()
  if not any(ret): log.debug("Public key converted to the all-zero Curve25519 key")
  return ret

def ed25519_sk_to_curve25519(sk) -> bytes:
  """
  Convert an Ed25519 secret key (32-byte seed, or seed + pk as in sodium)
  into a Curve25519 secret key.

  This is the same clamped scalar that Ed25519 signs with, so the result
  matches the converted public key.
  """
  return clamp(sha512(seedbytes(sk))[:32])

def ed25519_sign_to_curve25519(pk, sig) -> bytes:
  """
  Store the sign of the Ed25519 public key in the high bit of the signature.

  A verifier holding only the Curve25519 public key can then restore the
  Edwards point (XEdDSA convention used by Signal). The bit is unused by
  valid signatures (s < q < 2^253), and nothing is verified here.
  """
  ret = bytearray(sigbytes(sig))
  ret[63] |= sign_bit(pk)
  return bytes(ret)

def ed25519_pk_sign(pk) -> bool:
  """True if the public key has its x coordinate sign bit set."""
  return bool(sign_bit(pk))
