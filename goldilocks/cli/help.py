import sys
from typing import NoReturn, Optional

import goldilocks

T = "\x1B[1;44m"  # titlebar (white on blue)
H = "\x1B[1;37m"  # heading (bright white)
C = "\x1B[0;34m"  # command (dark blue)
F = "\x1B[1;34m"  # flag (light blue)
D = "\x1B[1;30m"  # dark / syntax markup
N = "\x1B[0m"     # normal color

usage = dict(
  keygen=f"{C}goldilocks {F}keygen {D}[{F}-p {D}|{F} --password {N}pw{D}] [{F}-o {N}key.pub{D}] [{F}-s {N}key.sec{D}] [{F}-A{D}]{N}\n",
  enc=f"{C}goldilocks {F}enc -R {N}key.pub {D}[{F}-o {N}cryptogram.txt {D}|{F} -A{D}] [{N}message.txt{D}]{N}\n",
  dec=f"{C}goldilocks {F}dec {D}[{F}-p {D}|{F} --password {N}pw{D}] [{F}-A {D}|{N} cryptogram.txt{D}] [{F}-o {N}message.txt{D}]{N}\n",
  senc=f"{C}goldilocks {F}senc {D}[{F}-p {D}|{F} --password {N}pw{D}] [{F}-o {N}cryptogram.txt {D}|{F} -A{D}] [{N}message.txt{D}]{N}\n",
  sdec=f"{C}goldilocks {F}sdec {D}[{F}-p {D}|{F} --password {N}pw{D}] [{F}-A {D}|{N} cryptogram.txt{D}] [{F}-o {N}message.txt{D}]{N}\n",
  sign=f"{C}goldilocks {F}sign {D}[{F}-p {D}|{F} --password {N}pw{D}] [{F}-o {N}message.sig {D}|{F} -A{D}] [{N}message.txt{D}]{N}\n",
  verify=f"{C}goldilocks {F}verify -R {N}key.pub {F}-S {N}message.sig {D}[{N}message.txt{D}]{N}\n",
  hash=f"{C}goldilocks {F}hash {D}[{F}-o {N}digest.txt{D}] [{N}file{D}]{N}\n",
  mac=f"{C}goldilocks {F}mac {D}[{F}-p {D}|{F} --password {N}pw{D}] [{F}-o {N}mac.txt{D}] [{N}file{D}]{N}\n",
)

usagetext = dict(
  keygen=f"""\
Derive a key pair from a passphrase. The same passphrase always gives the same
keys, so the passphrase is all you need to keep. Only the public key is output
unless a file for the private scalar is given.

  {F}-p{N}                Ask for the passphrase (default)
  {F}--password{N} PW     Passphrase on command line (visible to other users!)
  {F}-o{N} FILENAME       Public key output file (default stdout)
  {F}-s{N} FILENAME       Also write the private scalar to this file
  {F}-A{N}                Copy the public key to clipboard
""",
  enc=f"""\
Encrypt a message for the holder of a public key. The message is read from the
file given, or from stdin when no file or {F}-{N} is given.

  {F}-R{N} FILENAME       Public key file of the recipient
  {F}-o{N} FILENAME       Cryptogram output file (default stdout)
  {F}-A{N}                Copy the cryptogram to clipboard
""",
  dec=f"""\
Decrypt a cryptogram with the passphrase of your key pair. Nothing is output
unless the cryptogram authenticates.

  {F}-p{N}                Ask for the passphrase (default)
  {F}--password{N} PW     Passphrase on command line
  {F}-o{N} FILENAME       Plaintext output file (default stdout)
  {F}-A{N}                Paste the cryptogram from clipboard
""",
  senc=f"""\
Encrypt a message with a passphrase only, no key pair involved. A random salt
makes every cryptogram different.

  {F}-p{N}                Ask for the passphrase (default)
  {F}--password{N} PW     Passphrase on command line
  {F}-o{N} FILENAME       Cryptogram output file (default stdout)
  {F}-A{N}                Copy the cryptogram to clipboard
""",
  sdec=f"""\
Decrypt a cryptogram made with {F}senc{N}. Nothing is output unless the
cryptogram authenticates.

  {F}-p{N}                Ask for the passphrase (default)
  {F}--password{N} PW     Passphrase on command line
  {F}-o{N} FILENAME       Plaintext output file (default stdout)
  {F}-A{N}                Paste the cryptogram from clipboard
""",
  sign=f"""\
Sign a message with the passphrase of your key pair.

  {F}-p{N}                Ask for the passphrase (default)
  {F}--password{N} PW     Passphrase on command line
  {F}-o{N} FILENAME       Signature output file (default stdout)
  {F}-A{N}                Copy the signature to clipboard
""",
  verify=f"""\
Verify a signature of a message against the signer's public key.

  {F}-R{N} FILENAME       Public key file of the signer
  {F}-S{N} FILENAME       Signature file
""",
  hash=f"Compute a 512-bit KMACXOF256 digest of a file or stdin.\n",
  mac=f"Compute a 512-bit KMACXOF256 authentication tag under a passphrase.\n",
)

cmdhelp = {k: f"{usage[k]}\n{usagetext.get(k, '')}".rstrip("\n") + "\n" for k in usage}

introduction = f"Goldilocks {goldilocks.__version__} - Ed448 public key encryption and signatures"

introduction = f"""\
{T}{introduction:78}{N}
"""

shorthelp = f"""\
{introduction}
{"".join(usage.values())}
Getting started: create a key pair with {C}goldilocks {F}keygen -o {N}me.pub and give
me.pub to others. They {F}enc{N} messages for you and you {F}dec{N} them with your
passphrase. Use {F}sign{N} and {F}verify{N} the same way.

  {F}--help --version{N}  Useful information. Help applies to subcommands too.
"""

allcommands = '\n\n'.join(cmdhelp.values())

fullhelp = f"""\
{introduction}
{allcommands}"""

def print_help(modehelp: Optional[str] = None, error: Optional[str] = None) -> NoReturn:
  stream = sys.stderr if error else sys.stdout
  if modehelp is None: stream.write(shorthelp)
  elif (h := cmdhelp.get(modehelp)): stream.write(h)
  else: stream.write(fullhelp)
  if error:
    stream.write(f"\n{error}\n")
    sys.exit(1)
  sys.exit(0)

def print_version() -> NoReturn:
  print(f"Goldilocks {goldilocks.__version__}")
  sys.exit(0)
