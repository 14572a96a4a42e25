from pon.reader.parser import read, read_atom, tokenize, TokenStream

__all__ = ["read", "read_atom", "tokenize", "TokenStream"]
