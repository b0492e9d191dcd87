import sys

from goldilocks.cli.help import print_help, print_version


class Args:

  def __init__(self):
    self.mode = None
    self.files = []
    self.askpass = 0
    self.passwords = []
    self.pubkeys = []
    self.sigfiles = []
    self.outfile = []
    self.skfile = []
    self.paste = None
    self.debug = None


keygenargs = dict(
  askpass='-p --passphrase'.split(),
  passwords='--password'.split(),
  outfile='-o --out --output'.split(),
  skfile='-s --secret-key'.split(),
  paste='-A'.split(),
  debug='--debug'.split(),
)

encargs = dict(
  pubkeys='-R --pubkey'.split(),
  outfile='-o --out --output'.split(),
  paste='-A'.split(),
  debug='--debug'.split(),
)

decargs = dict(
  askpass='-p --passphrase'.split(),
  passwords='--password'.split(),
  outfile='-o --out --output'.split(),
  paste='-A'.split(),
  debug='--debug'.split(),
)

signargs = dict(
  askpass='-p --passphrase'.split(),
  passwords='--password'.split(),
  outfile='-o --out --output'.split(),
  paste='-A'.split(),
  debug='--debug'.split(),
)

verifyargs = dict(
  pubkeys='-R --pubkey'.split(),
  sigfiles='-S --signature'.split(),
  debug='--debug'.split(),
)

hashargs = dict(
  outfile='-o --out --output'.split(),
  debug='--debug'.split(),
)

sencargs = dict(
  askpass='-p --passphrase'.split(),
  passwords='--password'.split(),
  outfile='-o --out --output'.split(),
  paste='-A'.split(),
  debug='--debug'.split(),
)

sdecargs = decargs

macargs = dict(
  askpass='-p --passphrase'.split(),
  passwords='--password'.split(),
  outfile='-o --out --output'.split(),
  debug='--debug'.split(),
)


def needhelp(av):
  """Check for -h and --help but not past --"""
  for a in av:
    if a == '--': return False
    if a.lower() in ('-h', '--help'): return True
  return False

def subcommand(arg):
  if arg in ('keygen', 'genkey', '-g'): return 'keygen', keygenargs
  if arg in ('enc', 'encrypt', '-e'): return 'enc', encargs
  if arg in ('dec', 'decrypt', '-d'): return 'dec', decargs
  if arg in ('sign', '-s'): return 'sign', signargs
  if arg in ('verify', '-v'): return 'verify', verifyargs
  if arg in ('senc', 'symenc'): return 'senc', sencargs
  if arg in ('sdec', 'symdec'): return 'sdec', sdecargs
  if arg in ('hash', ): return 'hash', hashargs
  if arg in ('mac', ): return 'mac', macargs
  if arg in ('help', ): return 'help', {}
  return None, {}

def argparse():
  # Custom parsing due to argparse module's limitations
  av = sys.argv[1:]
  if not av:
    print_help()

  if any(a.lower() == '--version' for a in av):
    print_version()

  args = Args()
  # Separate mode selector from other arguments
  if av[0].startswith("-") and len(av[0]) > 2 and not needhelp(av):
    av.insert(1, f'-{av[0][2:]}')
    av[0] = av[0][:2]

  args.mode, ad = subcommand(av[0])

  if args.mode == 'help' or needhelp(av):
    if args.mode == 'help' and len(av) == 2 and (mode := subcommand(av[1])[0]):
      print_help(mode)
    print_help(args.mode or "help")

  if args.mode is None:
    sys.stderr.write(' 💣  Invalid or missing command (keygen/enc/dec/senc/sdec/sign/verify/hash/mac/help).\n')
    sys.exit(1)

  aiter = iter(av[1:])
  shortargs = [flag[1:] for switches in ad.values() for flag in switches if not flag.startswith("--")]
  for a in aiter:
    aprint = a
    if not a.startswith('-'):
      args.files.append(a)
      continue
    if a == '-':
      args.files.append(True)
      continue
    if a == '--':
      args.files += aiter
      break
    if a.startswith('--'):
      a = a.lower()
    if not a.startswith('--') and len(a) > 2:
      falseargs = [arg for arg in a[1:] if arg not in shortargs]
      if falseargs:
        print_help(args.mode, f' 💣  Unknown argument: goldilocks {args.mode} {a} (failing -{" -".join(falseargs)})')
      a = [f'-{shortarg}' for shortarg in a[1:]]
    if isinstance(a, str):
      a = [a]
    for flag in a:
      argvar = next((k for k, v in ad.items() if flag in v), None)
      if argvar is None:
        print_help(args.mode, f' 💣  Unknown argument: goldilocks {args.mode} {aprint}')
      try:
        var = getattr(args, argvar)
        if isinstance(var, list):
          var.append(next(aiter))
        elif isinstance(var, int) and not isinstance(var, bool):
          setattr(args, argvar, var + 1)
        else:
          setattr(args, argvar, True)
      except StopIteration:
        print_help(args.mode, f' 💣  Argument parameter missing: goldilocks {args.mode} {aprint} …')

  return args
