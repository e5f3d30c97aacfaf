# vbbs

Building blocks for a small bulletin board system. The package is pure Python
and uses only the standard library.

## Modules

- `vbbs.sha1`: SHA-1 hashing. `Sha1(data=b"")` offers `update`, `digest`,
  `hexdigest` (lower-case) and `copy`. `sha1(data)` returns the 20-byte digest
  in one call. If you pass a `str` instead of bytes, `update` raises
  `TypeError`.
- `vbbs.arraylist`: `ArrayList(destructor=None)` is an ordered list. It
  provides `append`, indexing, `del`, `clear`, `is_empty`, `len`, iteration
  and `contains(item, comparator=None)`.
  - When an item is removed, the destructor runs on it only if that same
    object no longer appears anywhere in the list.
  - An index outside `0 .. len - 1` raises `IndexError`.
  - The module also supplies comparators: `same_item` (identity, the default),
    `equal_items`, `equal_ignore_case` (ASCII case only), `uint8_equal`,
    `uint16_equal`, `uint32_equal`, `int8_equal`, `int16_equal` and
    `int32_equal`.
- `vbbs.ringbuffer`: `RingBuffer(max_size)` is a fixed-size byte FIFO.
  - Pushing into a full buffer drops the oldest byte.
  - `pop` and `peek` return 0 when the buffer is empty. `read(size)` fills any
    positions beyond the stored data with 0.
  - `write_string(text)` writes the UTF-8 encoding of `text` up to its first
    NUL character.
- `vbbs.log`: `Logger(stream=None, level=LogLevel.DEBUG)` writes lines of the
  form `[LEVEL] message` to a stream, which is stderr by default.
  - Messages use printf-style `%` arguments and are written at or above the
    logger's level. The levels are `DEBUG`, `INFO`, `WARN` (shown as
    `WARNING`) and `ERROR`.
  - `open(filename)` also appends messages to a file. A file that cannot be
    opened is reported as an error message rather than raised.
  - A logger is a context manager that closes its file on exit.
  - A shared logger is available through the module-level functions
    `init_log`, `close_log`, `set_log_level`, `log_message`, `debug`, `info`,
    `warn` and `error`.
- `vbbs.hashmap`: `Map(value_destructor=None)` maps string keys to values.
  - It provides `put(key, value, destructor=None)`, `get`, `[]`, `del`,
    `remove` (which ignores missing keys), `clear`, `in`,
    `contains_value(value, comparator=None)`, `len` and iteration over keys.
  - A value that is replaced or removed goes to its destructor only if no
    other entry still holds that same object. `None` values never go to a
    destructor.
  - Keys that are not strings raise `TypeError`.
- `vbbs.timefmt`: `format_time(timestamp)` renders a 32-bit Unix timestamp in
  local time as `DD Mon YYYY HH:MM:SS`.
- `vbbs.terminal`:
  - ANSI escape-sequence constants such as `CLEAR_SCREEN`, `SET_CONCEAL`,
    `RESET_MODES` and the `SET_FG_*` and `SET_BG_*` colours.
  - Helpers that build sequences: `set_cursor_pos`, `set_cursor_col`,
    `cursor_up`, `cursor_down`, `cursor_right`, `cursor_left`, `set_color`,
    `set_fg_rgb`, `set_bg_rgb`, `set_fg_256` and `set_bg_256`.
  - `Terminal` holds the terminal's type, ANSI flag, width and height, which
    default to `"Unknown"`, true, 80 and 24.
  - `identify(out)` writes the device-attributes query to any object with a
    `write(str)` method.
  - `check_identify_response(out, response, terminal)` reads the reply into
    `terminal`, naming types such as VT100 or VT220, and writes whether ANSI
    escape codes are enabled.
  - `TerminalType` has the members `RAW` and `ANSI`.
- `vbbs.user`: `User` is a dataclass with `user_id`, `username`, `pw_hash`,
  `email`, `user_type` (`UserType.REGULAR` or `UserType.ADMIN`) and
  `last_seen`.
  - `hash_password(password)` returns the upper-case hexadecimal SHA-1 of the
    UTF-8 password.
  - `change_password` stores that hash. It raises `PasswordTooShortError` (a
    `ValueError`) for passwords shorter than eight bytes.
  - `authenticate(username, password)` checks both the username and the
    password.
  - `copy` returns an independent copy.

## Example

```python
import io

from vbbs.ringbuffer import RingBuffer
from vbbs.terminal import Terminal, check_identify_response
from vbbs.user import User

password = "password"
user = User(username="alice", email="alice@example.com")
user.change_password(password)
assert user.authenticate("alice", password)

rb = RingBuffer(4)
rb.write(b"abcdef")
assert rb.read(4) == b"cdef"

out = io.StringIO()
terminal = Terminal()
check_identify_response(out, "\033[?62;1;6c", terminal)
assert terminal.type == "VT220"
```

## What the package does not do

The package provides no server and no command to run. It does not accept
telnet, serial, modem or console connections. It has no login or new-user
session flow and no user database: it does not store or load users anywhere.
These pieces can be built on the modules above.

## Installation and tests

```
pip install .
pip install .[test]
pytest
```