import os
import sys

import pyperclip

from goldilocks import passphrase, util
from goldilocks.exceptions import CliArgError


def read_input(args) -> bytes:
  """The message from the single input file, or from stdin."""
  if len(args.files) > 1:
    raise CliArgError("Only one input file is allowed.")
  if not args.files or args.files[0] is True:
    return sys.stdin.buffer.read()
  fn = args.files[0]
  if not os.path.isfile(fn):
    raise ValueError(f"Input file {fn} not found")
  with open(fn, "rb") as f:
    return f.read()


def read_text(fn: str, what: str) -> str:
  """Read a key, cryptogram or signature file."""
  if not os.path.isfile(fn):
    raise ValueError(f"The {what} file {fn} not found")
  if os.path.getsize(fn) > util.TEXT_MAX_SIZE:
    raise ValueError(f"The {what} file {fn} is too large")
  with open(fn, "rb") as f:
    try:
      return f.read().decode()
    except UnicodeDecodeError:
      raise ValueError(f"The {what} file {fn} could not be decoded. Only UTF-8 text is supported.")


def read_armored(args, what: str) -> str:
  """Cryptograms come from the clipboard (-A), the input file or stdin."""
  if args.paste:
    if args.files:
      raise CliArgError(f"Cannot paste the {what} and read a file at the same time.")
    return pyperclip.paste()
  if len(args.files) > 1:
    raise CliArgError("Only one input file is allowed.")
  if args.files and args.files[0] is not True:
    return read_text(args.files[0], what)
  return sys.stdin.read()


def get_passphrase(args, prompt="Passphrase") -> bytes:
  if len(args.passwords) > 1:
    raise CliArgError("Only one passphrase may be given.")
  if args.passwords and not args.askpass:
    return util.encode(args.passwords[0])
  return passphrase.ask(prompt)


def write_output(args, text: str, what: str) -> None:
  """Write a text result to the output file (-o) or stdout, and the clipboard with -A."""
  if args.outfile:
    with open(args.outfile, "w") as f:
      f.write(text)
    sys.stderr.write(f" 📄 {what.capitalize()} written to {args.outfile}\n")
  elif not args.paste:
    sys.stdout.write(text)
    sys.stdout.flush()
  if args.paste:
    pyperclip.copy(text)
    sys.stderr.write(f" 📋 {what.capitalize()} copied to clipboard\n")


def new_passphrase(args) -> bytes:
  """Passphrase for something new, asked twice unless given with --password."""
  if args.passwords and not args.askpass:
    return get_passphrase(args)
  pw = passphrase.ask("New passphrase")
  if passphrase.ask("Repeat passphrase") != pw:
    raise ValueError("The passphrases do not match.")
  return pw
