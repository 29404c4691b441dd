"""
Scytale -- Classical Cipher Toolkit
====================================

Educational implementations of classical ciphers (shift, substitution,
Polybius and Two-Square, AMSCO transposition, ADFGX/ADFGVX
fractionation, Quagmire I-IV, Morse) plus a frequency analyzer that
scores decryption candidates against reference language statistics.

Modules:
    - scytale.core: Base cipher contract, primitives, keys, models, engine
    - scytale.ciphers: Cipher variants and the name registry
    - scytale.analyzers: Frequency analysis and reference tables
    - scytale.output: Console and report output
    - scytale.cli: Click-based command-line interface

References:
    - Kahn, D. (1996). The Codebreakers. Scribner.
    - Gaines, H. F. (1956). Cryptanalysis. Dover.
"""

__version__ = "1.0.0"
__tool_name__ = "scytale"
