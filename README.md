# harbol

A small library of general-purpose building blocks. It depends on nothing but the standard library.

| Module | What it holds |
| --- | --- |
| `harbol.hstring` | `HarbolString`, a mutable string with in-place editing |
| `harbol.tree` | `Tree`, an n-ary tree node with a value and ordered children |
| `harbol.tuple_layout` | `Tuple`, a byte block laid out as fields with C struct padding, or packed |
| `harbol.variant` | `Variant`, a copy of some bytes paired with an integer tag |
| `harbol.mtwister` | `MTRand`, a seeded Mersenne Twister generator |
| `harbol.common` | SDBM hashes for hash tables, alignment helpers, bounds checks, `cstr_switch`, `array_shift_up` |
| `harbol.intmath` | integer logarithms, digit counts and power-of-two helpers on 64-bit words |

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Strings

```python
from harbol.hstring import HarbolString

s = HarbolString("a_____BBa_BBa")
s.replace("BB", "    ")          # replaces all; pass an amount to limit it
print(str(s), len(s))

s = HarbolString("hello world!")
s.reverse()
print(s)                         # !dlrow olleh
print(s.remove_char("l"))        # 3

s = HarbolString("this is keks")
s.replace_range(3, 5, "topkeks") # characters 3..5 inclusive
print(s)                         # thitopkeks keks
```

`HarbolString` also offers `add`, `add_char`, `add_char_rep`, `copy`, `format` (printf-style, appending unless `clear` is true), `compare`, `is_empty`, `is_palindrome`, `read_file`, `replace_char`, `count`, `count_char`, `offsets`, `upper`, `lower`, `trim_spaces` and `find_char`. `add` and `copy` ignore an empty argument and return `False`. `find_char` returns -1 when the character is absent. `replace_range` raises `IndexError` for a lower bound outside the string.

## Trees

```python
from harbol.tree import Tree

root = Tree("program")
stmt = root.insert_value("stmt")
for word in ("if", "cond", "stmt", "else"):
    stmt.insert_value(word)
print([child.value for child in stmt])   # ['if', 'cond', 'stmt', 'else']

stmt.remove_index(1)
stmt.remove_value("else")
print(len(stmt))                          # 2
```

`node_at` raises `IndexError` for a bad index. `remove_node` and `remove_value` raise `ValueError` when nothing matches. `node_by_value` returns `None` when nothing matches. A removed child is cleared.

## Tuples with C alignment

```python
from harbol.tuple_layout import Tuple

t = Tuple([1, 4, 2])                      # char, int, short
print(len(t), [t.offset(i) for i in range(3)])   # 12 [0, 4, 8]
t.set(1, (42).to_bytes(4, "little"))
print(t.get(1), t.to_bytes())

packed = Tuple([1, 4, 2], packed=True)
print(len(packed))                        # 7
```

Field sizes must be between 1 and 65535 bytes, and so must the whole block. `set` requires a value of exactly the field's size.

## Variants

```python
from harbol.variant import Variant

v = Variant((1).to_bytes(4, "little"), tag=4)
v.set((100).to_bytes(4, "little"))
print(v.data, v.size, v.tag)
v.clear()                                 # empty data, tag 0
```

## Random numbers

```python
from harbol.mtwister import MTRand

rng = MTRand(1337)
print(rng.next_uint(), rng.next_float())  # next_float lies in [0, 1]
```

## Helpers

```python
from harbol.common import string_hash, align_size, pad_size, cstr_switch
from harbol.intmath import int_log10, make_int_log_tables, int_log

print(string_hash("key"), align_size(13, 8), pad_size(13, 8))   # ... 16 3
print(cstr_switch("b", "a", "b", "c"))    # 1; -1 when nothing matches
print(int_log10(1000))                    # 3
table, powers = make_int_log_tables(3)    # base must be at least 3
print(int_log(81, table, powers))         # 4
```

The hashes are not cryptographic. They are meant for hash tables only.

## What it does not do

This is a library only. It has no command-line program. It does not load or watch plugins or shared libraries.