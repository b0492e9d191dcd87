from goldilocks import util, xof
from goldilocks.cli import files


def main_hash(args):
  data = files.read_input(args)
  digest = xof.kmacxof256(b"", data, 512, xof.DIGEST)
  files.write_output(args, f"{util.hexencode(digest)}\n", "hash")


def main_mac(args):
  data = files.read_input(args)
  pw = files.get_passphrase(args)
  tag = xof.kmacxof256(xof.encode_str(pw), data, 512, xof.CHALLENGE)
  del pw
  files.write_output(args, f"{util.hexencode(tag)}\n", "MAC")
