# hashchat

hashchat is the user registry of a chat. It stores each login as a key in an
open-addressing hash table. The value stored with each login is a SHA-1 style
digest of the user's password.

How the table works:

- It starts with 8 slots.
- It finds a slot with the multiplication method. It sums the bytes of the login and uses the multiplier `0.6`.
- It resolves collisions with quadratic probing: `(base + offset * offset) % size`.
- Before an insert, it doubles its size if it already holds at least 60% of its slot count.

## Install

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

```
hashchat
```

This runs a fixed demonstration. It takes no options apart from `-h`. In order, it:

1. Registers nine sample users.
2. Prints the table statistics and then the table.
3. Removes the user `admin`.
4. Tries to log `admin` in.
5. Prints the table again.

## Library use

```python
from hashchat.table import HashTable
from hashchat.sha1 import sha1

table = HashTable()
table.reg("alice", b"password")          # True once stored
assert table.login("alice", b"password")
assert not table.login("alice", b"secret")

assert table.remove("alice")             # slot is marked DELETED
assert not table.login("alice", b"password")

report = table.print_stats()             # printed and returned
table.show()

digest = sha1(b"abc")                    # tuple of five 32-bit words
```

### `hashchat.table`

`HashTable` has these methods:

- `reg(name, password)` stores `name` with the digest of `password`. The password may be `str` or `bytes`.
- `login(name, password)` returns whether the password matches the digest stored for `name`.
- `add(name, pass_hash)` stores a digest that was computed beforehand. It raises `ValueError` if the login is 10 bytes or longer in UTF-8. It returns `False` if none of the probed slots was available.
- `remove(name)` marks the login's slot as deleted. It returns whether the login was found.
- `resize()` doubles the table and re-inserts every live entry.
- `hash_func(name, offset)` returns the slot probed for a given offset.
- `print_stats()` prints the size and the entry count, and returns them as text.
- `show()` prints every slot. A live slot shows its login and its digest as hexadecimal.

Each slot is an `AuthData` with these fields:

- `login`
- `pass_hash`
- `status`, which is one of `SlotStatus.FREE`, `SlotStatus.ENGAGED` or `SlotStatus.DELETED`.

`add`, `remove` and `resize` print a short progress line in Russian.

### `hashchat.sha1`

`sha1(message)` returns five 32-bit words. For messages shorter than 56 bytes the result equals standard SHA-1. For longer messages it differs from standard SHA-1 in two ways:

- It starts the compression of every block from the initial constants.
- When the message length is 56 modulo 64, it pads within the last block.

The module also provides two helpers:

- `cycle_shift_left(val, bit_count)` rotates a 32-bit value left.
- `bring_to_human_view(val)` swaps the byte order of a 32-bit value.

## What it does not do

hashchat keeps users only in memory. It has no persistent storage, and it does not send or receive chat messages.