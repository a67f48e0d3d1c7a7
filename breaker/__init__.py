"""
Cryptex Breaker -- Classical Cipher Cryptanalysis
==================================================

Recovers keys and plaintext of Caesar and Vigenere ciphertexts from
letter-frequency statistics alone, without knowing the key in advance.
For breaking weak historical ciphers only; nothing here protects data.

Modules:
    - breaker.core.language: Alphabet and letter-frequency models
    - breaker.core.engine: Central analysis orchestrator
    - breaker.core.models: Pydantic result models
    - breaker.analyzers: Scoring, shifting, period finding and solvers
    - breaker.output: Console and JSON report output
    - breaker.cli: Click-based command-line interface

References:
    - Kasiski, F. W. (1863). Die Geheimschriften und die Dechiffrirkunst.
    - Pearson, K. (1900). On the criterion that a given system of
      deviations from the probable. Philosophical Magazine, 50(302).
    - Sinkov, A. (1966). Elementary Cryptanalysis.
"""

__version__ = "1.0.0"
__tool_name__ = "breaker"
