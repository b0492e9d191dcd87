from sys import argv

from zxcvbn import zxcvbn
from zxcvbn.time_estimates import display_time

from goldilocks import util
from goldilocks.cli import tty

MINLEN = 8  # Bytes, not characters

# The key pair is derived by a single KMACXOF256 call and a scalar
# multiplication, so a passphrase gets no protection from slow hashing.
# Assume an attacker testing ten million passphrases per second.
GUESS_RATE = 1e7
MIN_CRACK_TIME = 365 * 86400


def ask(prompt: str) -> bytes:
  """Read a passphrase from the terminal without echo."""
  pwd = tty.read_hidden(prompt)
  if not pwd:
    raise KeyboardInterrupt
  return util.encode(pwd)


def pwhints(pwd: str):
  """Return a strength report of the passphrase and whether it is strong enough."""
  maxlen = 20  # zxcvbn gets slow with long passwords
  z = zxcvbn(pwd[:maxlen], user_inputs=argv)
  fb = z["feedback"]
  warn = fb["warning"]
  sugg = fb["suggestions"]
  guesses = int(z["guesses"])
  if len(pwd) > maxlen:
    # Add one bit of entropy for each additional character (NIST entropy estimation)
    guesses <<= len(pwd) - maxlen
    del sugg[:]
  t = guesses / GUESS_RATE
  out = f"Estimated time to crack: {display_time(t)}\n"
  valid = True
  if len(util.encode(pwd)) < MINLEN or t < MIN_CRACK_TIME:
    out = "Choose a passphrase you don't use elsewhere.\n"
    valid = False
  elif not sugg:
    sugg.append("Seems long enough to protect the key pair.")
  if warn:
    out += f" ⚠️   {warn}\n"
  for sugg in sugg[:3 - bool(warn)]:
    out += f" ▶️   {sugg}\n"
  return out, valid
