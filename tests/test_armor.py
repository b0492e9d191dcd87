import pytest

from goldilocks import armor, dhies, keypair, sign
from goldilocks.elliptic import G, p, r
from goldilocks.exceptions import MalformedKeyError, TamperedInputError
from goldilocks.sign import Signature

PW = "test"


@pytest.fixture(scope="module")
def keys():
  return keypair.derive_keypair(PW)


def test_pk(keys):
  s, V = keys
  text = armor.encode_pk(V)
  assert text == f"{V.x.val}\n{V.y.val}\n"
  assert armor.decode_pk(text) == V
  # Label line and Windows line endings
  assert armor.decode_pk(f"Public Key (point):\r\n{V.x.val}\r\n{V.y.val}") == V


def test_sk(keys):
  s, V = keys
  assert armor.encode_sk(s) == f"{s}\n"
  assert int(armor.encode_sk(s)) * G == V


def test_pk_tampered(keys):
  s, V = keys
  for text in (
    "",
    f"{V.x.val}\n",
    f"{V.x.val}\n{V.y.val}\n{V.y.val}\n",
    f"{V.x.val}\nabc\n",
    f"-{V.x.val}\n{V.y.val}\n",
    f"{V.x.val + 1}\n{V.y.val}\n",
    f"{V.x.val + p}\n{V.y.val}\n",
  ):
    with pytest.raises(MalformedKeyError) as exc:
      armor.decode_pk(text)
    assert "Public key has been tampered" in str(exc.value)


def test_cryptogram(keys):
  s, V = keys
  cg = dhies.encrypt(b"hello", V)
  text = armor.encode_cryptogram(cg)
  lines = text.split("\n")
  assert len(lines) == 5 and lines[4] == ""
  assert lines[2] == cg.c.hex().upper()
  assert lines[3] == cg.t.hex().upper()
  assert armor.decode_cryptogram(text) == cg
  assert armor.decode_cryptogram(text.encode()) == cg
  assert dhies.decrypt(armor.decode_cryptogram(text.lower()), PW) == (b"hello", True)

  # Empty message has an empty ciphertext line
  cg = dhies.encrypt(b"", V)
  text = armor.encode_cryptogram(cg)
  assert text.split("\n")[2] == ""
  assert armor.decode_cryptogram(text) == cg


def test_cryptogram_tampered(keys):
  s, V = keys
  cg = dhies.encrypt(b"hello", V)
  x, y, c, t, _ = armor.encode_cryptogram(cg).split("\n")
  for lines in (
    [x, y, c],
    [x, "y", c, t],
    [str(int(x) + 1), y, c, t],
    [x, y, c + "F", t],
    [x, y, c[:-2] + "XY", t],
    [x, y, c, t[:-2]],
    [x, y, c, t + "00"],
  ):
    with pytest.raises(TamperedInputError):
      armor.decode_cryptogram("\n".join(lines))
  with pytest.raises(TamperedInputError):
    armor.decode_cryptogram(b"\xff\xfe")


def test_signature():
  sig = sign.sign(b"hello", PW)
  text = armor.encode_signature(sig)
  assert text == f"{sig.h}\n{sig.z}\n"
  assert armor.decode_signature(text) == sig
  assert armor.decode_signature(f"Signature:\n{text}") == sig

  for text in ("", f"{sig.h}\n", f"{sig.h}\nz\n", f"{1 << 448}\n{sig.z}\n", f"{sig.h}\n{r}\n"):
    with pytest.raises(TamperedInputError):
      armor.decode_signature(text)


def test_overlong_numbers(keys):
  s, V = keys
  # Far beyond any valid value, and beyond Python's int conversion limit
  with pytest.raises(TamperedInputError) as exc:
    armor.decode_signature("1" * 5000 + "\n1\n")
  assert "Signature has been tampered" in str(exc.value)
  with pytest.raises(MalformedKeyError) as exc:
    armor.decode_pk("9" * 5000 + "\n1\n")
  assert "Public key has been tampered" in str(exc.value)
  cg = armor.encode_cryptogram(dhies.encrypt(b"", V))
  with pytest.raises(TamperedInputError):
    armor.decode_cryptogram("9" * 5000 + cg)
  # One digit longer than the field prime is rejected without conversion
  with pytest.raises(TamperedInputError):
    armor.decode_pk("0" * (len(str(p)) + 1) + f"\n{V.y.val}\n")
