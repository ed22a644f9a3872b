"""Mutable strings, n-ary trees, C-aligned byte tuples, tagged variants, hashing, integer maths and a Mersenne Twister."""

__version__ = "1.0.0"
__all__ = ["common", "hstring", "intmath", "mtwister", "tree", "tuple_layout", "variant"]