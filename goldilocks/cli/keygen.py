import sys

from goldilocks import armor, keypair, passphrase
from goldilocks.cli import files, tty
from goldilocks.exceptions import CliArgError


def main_keygen(args):
  if args.files:
    raise CliArgError("Keygen takes no input files, use -o and -s for output.")
  if len(args.skfile) > 1:
    raise CliArgError("Only one secret key file may be specified.")
  pw = files.new_passphrase(args)
  hints, valid = passphrase.pwhints(pw.decode())
  if not valid:
    sys.stderr.write(f" ⚠️  Weak passphrase, anyone who guesses it gets your private key.\n{hints}")
  with tty.status("Deriving keys... "):
    s, V = keypair.derive_keypair(pw)
  del pw
  if args.skfile:
    with open(args.skfile[0], "w") as f:
      f.write(armor.encode_sk(s))
    sys.stderr.write(f" 🔑 Private key written to {args.skfile[0]}\n")
  del s
  files.write_output(args, armor.encode_pk(V), "public key")
