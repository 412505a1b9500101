# Conversion of Ed25519 keys and signatures to Curve25519 / X25519, in plain Python

# Not constant time and not zeroing buffers after use. Inputs are not checked
# to be valid or canonical curve points; verify with the converted keys.

# Public symbols are imported here.

from .convert import ed25519_pk_sign, ed25519_pk_to_curve25519, ed25519_sign_to_curve25519, ed25519_sk_to_curve25519
from .exceptions import ConversionError, MalformedKeyError, MalformedSignatureError
from .field import FieldElement, p
from .sha512 import Sha512, sha512
from .util import clamp

__version__ = "0.1.0"
