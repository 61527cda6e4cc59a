"""
cipher.py - Caesar shift over the ASCII alphabet
Single responsibility: pure text transform, invertible by negating the shift.
"""

_ALPHABET_SIZE = 26


def _shift_char(ch: str, shift: int) -> str:
    if "A" <= ch <= "Z":
        base = ord("A")
    elif "a" <= ch <= "z":
        base = ord("a")
    else:
        # digits, punctuation, whitespace and non-ASCII letters pass through
        return ch
    return chr(base + (ord(ch) - base + shift) % _ALPHABET_SIZE)


def cipher(text: str, shift: int) -> str:
    """
    Shift every ASCII letter in ``text`` by ``shift`` positions within its case.

    Any integer shift is accepted; it is reduced modulo 26 with Python's
    floored ``%``, so negative shifts wrap correctly (``cipher("a", -1) == "z"``).
    """
    if not text:
        return ""
    return "".join(_shift_char(ch, shift) for ch in text)


def encrypt(plaintext: str, shift: int) -> str:
    return cipher(plaintext, shift)


def decrypt(ciphertext: str, shift: int) -> str:
    return cipher(ciphertext, -shift)
