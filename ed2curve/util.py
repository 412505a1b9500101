from .exceptions import MalformedKeyError, MalformedSignatureError


def pkbytes(pk) -> bytes:
  """Validate a 32-byte public key and return it as bytes"""
  pk = bytes(pk)
  if len(pk) != 32: raise MalformedKeyError(f"Public key should be exactly 32 bytes, not {len(pk)}")
  return pk

def seedbytes(sk) -> bytes:
  """The 32-byte seed of an Ed25519 secret key"""
  # Sodium concatenates the public key, making it 64 bytes
  sk = bytes(sk)
  if len(sk) not in (32, 64): raise MalformedKeyError(f"Secret key should be 32 or 64 bytes, not {len(sk)}")
  return sk[:32]

def sigbytes(sig) -> bytes:
  sig = bytes(sig)
  if len(sig) != 64: raise MalformedSignatureError(f"Signature should be exactly 64 bytes, not {len(sig)}")
  return sig


def sign_bit(pk) -> int:
  """The sign of x in a compressed Ed25519 point, as bit 0x80 of the last byte."""
  return pkbytes(pk)[31] & 0x80

def clamp(k) -> bytes:
  """Standard RFC 7748 clamping of a 32 byte scalar"""
  # 256 bits 01[x]000 (low bits cleared for the cofactor, bit 254 set for the ladder)
  k = bytearray(pkbytes(k))
  k[0] &= 0xF8
  k[31] &= 0x7F
  k[31] |= 0x40
  return bytes(k)
