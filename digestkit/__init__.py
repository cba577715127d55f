"""Pure-Python MD2, MD4, MD5, GOST R 34.11-94, KangarooTwelve and BLAKE2 hash functions."""

__version__ = "0.1.0"
__all__ = ["blake2", "gost94", "k12", "lanes", "md2", "md4", "md5"]