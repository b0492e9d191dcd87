import sys

from goldilocks import armor, sign
from goldilocks.cli import files, tty
from goldilocks.exceptions import CliArgError


def main_sign(args):
  message = files.read_input(args)
  pw = files.get_passphrase(args)
  with tty.status("Signing... "):
    signature = sign.sign(message, pw)
  del pw
  files.write_output(args, armor.encode_signature(signature), "signature")


def main_verify(args):
  if len(args.pubkeys) != 1:
    raise CliArgError("Exactly one signer public key file (-R) is required.")
  if len(args.sigfiles) != 1:
    raise CliArgError("Exactly one signature file (-S) is required.")
  V = armor.decode_pk(files.read_text(args.pubkeys[0], "public key"))
  signature = armor.decode_signature(files.read_text(args.sigfiles[0], "signature"))
  message = files.read_input(args)
  with tty.status("Verifying... "):
    sign.require_valid(message, signature, V)
  sys.stderr.write(f" ✅ Signature verified ({args.pubkeys[0]})\n")
