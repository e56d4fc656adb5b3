"""A simple substitution cipher over the lower-case Latin alphabet."""

from __future__ import annotations

import argparse
from typing import Optional

PLAIN = "abcdefghijklmnopqrstuvwxyz"
CIPHER = "ngzqtcobmuhelkpdawxfyivrsj"

_ENCRYPT = str.maketrans(PLAIN, CIPHER)
_DECRYPT = str.maketrans(CIPHER, PLAIN)


def encrypt(text: str) -> str:
    """Substitute each lower-case letter; other characters are left as they are."""
    return text.translate(_ENCRYPT)


def decrypt(text: str) -> str:
    """Undo :func:`encrypt`."""
    return text.translate(_DECRYPT)


def main(argv: Optional[list[str]] = None) -> int:
    """Encrypt and decrypt a line of text, printing each stage."""
    parser = argparse.ArgumentParser(prog="cipher", description="Substitution cipher demo.")
    parser.add_argument("text", nargs="?", help="plain text (read from input if omitted)")
    args = parser.parse_args(argv)

    text = args.text
    if text is None:
        try:
            text = input("plain text: ")
        except EOFError:
            text = ""
    encrypted = encrypt(text)
    print("encryption and decryption:")
    print(f"  plain:     {text}")
    print(f"  encrypted: {encrypted}")
    print(f"  decrypted: {decrypt(encrypted)}")
    return 0