from goldilocks import armor, dhies, symmetric
from goldilocks.cli import files, tty
from goldilocks.exceptions import CliArgError


def main_enc(args):
  if len(args.pubkeys) != 1:
    raise CliArgError("Exactly one recipient public key file (-R) is required.")
  V = armor.decode_pk(files.read_text(args.pubkeys[0], "public key"))
  message = files.read_input(args)
  with tty.status("Encrypting... "):
    cryptogram = dhies.encrypt(message, V)
  files.write_output(args, armor.encode_cryptogram(cryptogram), "cryptogram")


def main_senc(args):
  message = files.read_input(args)
  pw = files.new_passphrase(args)
  with tty.status("Encrypting... "):
    cryptogram = symmetric.encrypt(message, pw)
  del pw
  files.write_output(args, armor.encode_symmetric(cryptogram), "cryptogram")
