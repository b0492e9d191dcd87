def toint(b: bytes) -> int:
  """Interpret XOF output as a big-endian non-negative integer."""
  return int.from_bytes(b, "big")

def tobytes(x: int) -> bytes:
  """Minimal big-endian two's complement bytes of a non-negative integer."""
  # Always one sign bit to spare, so 255 becomes 00 ff and zero is a single 00
  if x < 0: raise ValueError("Only non-negative integers are encoded")
  return x.to_bytes(x.bit_length() // 8 + 1, "big")

def tobytes_le(x: int) -> bytes:
  """57-byte little-endian encoding used by compressed points."""
  return x.to_bytes(57, "little")

def toint_le(b: bytes) -> int:
  if len(b) != 57: raise ValueError("Should be exactly 57 bytes")
  return int.from_bytes(b, "little")
