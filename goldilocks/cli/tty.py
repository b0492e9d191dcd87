import io
import os
import sys
import time
from contextlib import contextmanager


@contextmanager
def status(message):
  """Write a temporary status message that is cleared once processing is complete."""
  if sys.stderr.isatty():
    sys.stderr.write(message)
    sys.stderr.flush()
    try:
      yield
    finally:
      sys.stderr.write("\r\x1B[0K")
      sys.stderr.flush()
  else:
    yield


def read_hidden(prompt):
  """Read one line from the terminal without echo. ESC or Ctrl+C interrupts."""
  with terminal() as term:
    term.write(f'{prompt}: \x1B[1;30m')
    try:
      data = ""
      while True:
        for key in term.reader():
          if key == "ESC":
            raise KeyboardInterrupt
          elif key == "BACKSPACE":
            data = data[:-1]
          elif key == "ENTER":
            return data
          elif len(key) == 1:
            data += key
        status = f"  ({len(data)}) "
        term.write(f"{status}\x1B[{len(status)}D")
    finally:
      # Return to start of line and clear the prompt
      term.write(f"\x1B[0m\r\x1B[0K")


@contextmanager
def unix_terminal():
  fd = os.open('/dev/tty', os.O_RDWR | os.O_NOCTTY)
  with io.FileIO(fd, 'w+') as tty:
    old = termios.tcgetattr(fd)  # a copy to save
    new = old[:]
    new[3] &= ~termios.ECHO
    new[3] &= ~termios.ICANON
    try:
      termios.tcsetattr(fd, termios.TCSAFLUSH, new)
      yield Terminal(tty)
    finally:
      # Restore the original state
      termios.tcsetattr(fd, termios.TCSAFLUSH, old)
      tty.flush()


@contextmanager
def windows_terminal():
  yield Terminal(None)


try:
  import termios
  terminal = unix_terminal
except ImportError:
  import msvcrt
  terminal = windows_terminal


class Terminal:
  """Keypress reader yielding printable characters and ENTER/BACKSPACE/ESC."""

  def __init__(self, tty=None):
    self.tty = tty
    self.reader = self.reader_windows if tty is None else self.reader_unix

  def write(self, text):
    if self.tty:
      self.tty.write(text.encode())
      self.tty.flush()
    else:
      sys.stderr.write(text)
      sys.stderr.flush()

  def reader_windows(self):
    while True:
      ch = msvcrt.getwch()
      if ch in ('\x00', '\xe0'):
        msvcrt.getwch()  # Arrow and function keys are ignored
      elif ch == '\x03':
        raise KeyboardInterrupt
      elif ch == '\x1B':
        yield 'ESC'
      elif ch == '\b':
        yield 'BACKSPACE'
      elif ch == '\r':
        yield 'ENTER'
      elif ch.isprintable():
        yield ch
      if not msvcrt.kbhit():
        break

  def reader_unix(self):
    for ch in self.tty.read(4096).decode(errors="replace"):
      if ch == '\x1B':
        yield 'ESC'
      elif ch == '\x7F':
        yield 'BACKSPACE'
      elif ch in ('\n', '\r'):
        yield 'ENTER'
      elif ch == '\x03':
        raise KeyboardInterrupt
      elif ch.isprintable():
        yield ch
