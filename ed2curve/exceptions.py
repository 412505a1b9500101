class ConversionError(ValueError):
  """Key material cannot be converted"""

class MalformedKeyError(ConversionError):
  """Key has the wrong length for an Ed25519 public or secret key"""

class MalformedSignatureError(ConversionError):
  """Signature is not 64 bytes"""
