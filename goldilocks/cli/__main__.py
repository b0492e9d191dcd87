import sys
from typing import NoReturn

import colorama

from goldilocks.cli.args import argparse
from goldilocks.cli.dec import main_dec, main_sdec
from goldilocks.cli.digest import main_hash, main_mac
from goldilocks.cli.enc import main_enc, main_senc
from goldilocks.cli.keygen import main_keygen
from goldilocks.cli.sig import main_sign, main_verify
from goldilocks.exceptions import CliArgError

modes = {
  "keygen": main_keygen,
  "enc": main_enc,
  "dec": main_dec,
  "senc": main_senc,
  "sdec": main_sdec,
  "sign": main_sign,
  "verify": main_verify,
  "hash": main_hash,
  "mac": main_mac,
}


def main() -> NoReturn:
  """
  The main CLI entry point.

  Consider calling goldilocks.keypair, goldilocks.dhies, goldilocks.symmetric and goldilocks.sign
  directly if you use from Python code.

  System exit codes:
  * 0 The requested function was completed successfully
  * 1 CLI argument error
  * 2 Interrupted by user
  * 3 I/O error (broken pipe)
  * 10 Tampered input, authentication failure, bad signature and other errors

  :raises SystemExit: on normal exit or any expected error, including KeyboardInterrupt
  :raises Exception: on unexpected error (report a bug), or on any error with `--debug`
  """
  colorama.init()
  # CLI argument processing
  args = argparse()
  if len(args.outfile) > 1:
    sys.stderr.write(' 💣  Only one output file may be specified.\n')
    sys.exit(1)
  args.outfile = args.outfile[0] if args.outfile else None

  # A quick sanity check, not entirely reliable
  if args.outfile and args.outfile in args.files:
    sys.stderr.write(' 💣  In-place operation is not supported, cannot use the same file as input and output.\n')
    sys.exit(1)

  # Run the mode-specific main function
  if args.debug:
    modes[args.mode](args)  # --debug makes us not catch errors
    sys.exit(0)
  try:
    modes[args.mode](args)  # Normal run
  except CliArgError as e:
    sys.stderr.write(f" 💣  {e}\n")
    sys.exit(1)
  except ValueError as e:
    sys.stderr.write(f"Error: {e}\n")
    sys.exit(10)
  except BrokenPipeError:
    sys.stderr.write('I/O error (broken pipe)\n')
    sys.exit(3)
  except KeyboardInterrupt:
    sys.stderr.write("Interrupted.\n")
    sys.exit(2)
  sys.exit(0)

if __name__ == "__main__":
  main()
