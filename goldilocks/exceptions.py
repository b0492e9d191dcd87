class NoSquareRoot(ValueError):
  """No point exists on the curve for the given y coordinate"""

class AuthenticationError(ValueError):
  """Cryptogram authentication tag does not match (wrong passphrase or tampered data)"""

class SignatureMismatch(ValueError):
  """Signature does not verify for the message and public key"""

class TamperedInputError(ValueError):
  """Serialized input is malformed or has been tampered with"""

class MalformedKeyError(TamperedInputError):
  """Key string is malformed or the key is not usable"""

class CliArgError(ValueError):
  """Invalid CLI argument"""
