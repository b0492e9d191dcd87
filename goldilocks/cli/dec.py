import sys

from goldilocks import armor, dhies, symmetric
from goldilocks.cli import files, tty
from goldilocks.util import TTY_MAX_SIZE


def main_dec(args):
  # Any tampering of the text is reported before asking for a passphrase
  cryptogram = armor.decode_cryptogram(files.read_armored(args, "cryptogram"))
  pw = files.get_passphrase(args)
  with tty.status("Decrypting... "):
    message = dhies.decrypt_authenticated(cryptogram, pw)
  del pw
  write_message(args, message)


def main_sdec(args):
  cryptogram = armor.decode_symmetric(files.read_armored(args, "cryptogram"))
  pw = files.get_passphrase(args)
  with tty.status("Decrypting... "):
    message = symmetric.decrypt_authenticated(cryptogram, pw)
  del pw
  write_message(args, message)


def write_message(args, message: bytes):
  """Write an authenticated plaintext to the output file or stdout."""
  if args.outfile:
    with open(args.outfile, "wb") as f:
      f.write(message)
    sys.stderr.write(f" 📄 Message written to {args.outfile}\n")
    return
  pretty = sys.stdout.isatty()
  try:
    text = message.decode()
  except UnicodeDecodeError:
    if pretty:
      raise ValueError("The message is binary data, use -o FILENAME to save it.")
    sys.stdout.buffer.write(message)
    sys.stdout.flush()
    return
  if pretty:
    if len(message) > TTY_MAX_SIZE:
      raise ValueError("The message is too long for terminal output, use -o FILENAME to save it.")
    # Replace dangerous characters
    text = ''.join(c if c.isprintable() or c in ' \t\n' else repr(c)[1:-1] for c in text)
    sys.stderr.write(" 💬\n")
  sys.stdout.write(text)
  sys.stdout.flush()
