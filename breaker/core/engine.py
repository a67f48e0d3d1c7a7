"""
Breaker Analysis Engine
========================

Central orchestrator for the Breaker cryptanalysis toolkit. The
:class:`BreakerEngine` binds one language model and one configuration,
calls the analyzers with them, logs each operation and wraps the raw
tuples in result models for the console and report layers.

Architecture follows the Facade pattern (Gamma et al., 1994), providing
a simplified interface over the individual analyzer functions.

References:
    - Gamma, E., Helm, R., Johnson, R., & Vlissides, J. (1994).
      Design Patterns: Elements of Reusable Object-Oriented Software.
      Addison-Wesley.
"""

from __future__ import annotations

from typing import Iterable, Mapping, Optional

from shared.config import CryptexConfig
from shared.logger import CryptexLogger
from breaker.analyzers import brute_force as brute
from breaker.analyzers import caesar, substitution, vigenere
from breaker.analyzers.fitness import chi_squared
from breaker.analyzers.period import gap_histogram, key_length_from_gaps
from breaker.analyzers.shift import Offset, key_offset
from breaker.core.language import LanguageModel, get_language
from breaker.core.models import (
    BruteForceCandidate,
    BruteForceReport,
    CaesarCandidate,
    CaesarResult,
    PeriodGuess,
    PeriodReport,
    VigenereResult,
)


class BreakerEngine:
    """Runs every Breaker operation against one language model.

    Usage::

        engine = BreakerEngine()
        result = engine.crack_caesar("Khoor, Zruog!")
        print(result.key, result.plaintext)

        guess = engine.crack_vigenere(ciphertext)
        if guess is None:
            print("no repeated substrings found")

    Args:
        config: Configuration; defaults are used when omitted.
        language: Language model. When omitted it is resolved from
            ``config.breaker.language``, consulting the configured
            ``[languages]`` tables before the built-in ones.

    Attributes:
        config: The configuration in use.
        language: The bound language model.
        language_name: Name reported in result models.
        logger: Logger for the engine.
    """

    def __init__(
        self,
        config: Optional[CryptexConfig] = None,
        language: Optional[LanguageModel] = None,
        language_name: Optional[str] = None,
    ) -> None:
        self.config = config or CryptexConfig()
        gs = self.config.global_settings
        self.logger = CryptexLogger(
            "breaker.engine",
            log_level="DEBUG" if gs.debug else gs.log_level,
            log_file=gs.log_file or None,
            json_logs=gs.log_json,
        )

        if language is None:
            name = language_name or self.config.breaker.language
            language = get_language(name, self.config.languages)
            language_name = name.lower()
        self.language = language
        self.language_name = language_name or "custom"

    # ------------------------------------------------------------------ #
    #  Known-key operations
    # ------------------------------------------------------------------ #

    def caesar_encrypt(self, plaintext: str, key: Offset) -> str:
        return caesar.encrypt(plaintext, key, self.language)

    def caesar_decrypt(self, ciphertext: str, key: Offset) -> str:
        return caesar.decrypt(ciphertext, key, self.language)

    def vigenere_encrypt(self, plaintext: str, key: str) -> str:
        return vigenere.encrypt(plaintext, key, self.language)

    def vigenere_decrypt(self, ciphertext: str, key: str) -> str:
        return vigenere.decrypt(ciphertext, key, self.language)

    def substitution_encrypt(self, plaintext: str, key: Mapping[str, str] | str) -> str:
        return substitution.encrypt(plaintext, self._substitution_key(key), self.language)

    def substitution_decrypt(self, ciphertext: str, key: Mapping[str, str] | str) -> str:
        return substitution.decrypt(ciphertext, self._substitution_key(key), self.language)

    def _substitution_key(self, key: Mapping[str, str] | str) -> Mapping[str, str]:
        if isinstance(key, str):
            return substitution.key_from_permutation(key, self.language)
        return key

    def score(self, text: str) -> float:
        """Chi-squared distance of *text* from the bound language."""
        return chi_squared(text, self.language)

    def find_key(self, ciphertext: str, plaintext: str, key_length: int) -> str:
        """Vigenere key from a known plaintext."""
        with self.logger.operation("find_key"):
            key = vigenere.find_key_from_plaintext(
                ciphertext, plaintext, key_length, self.language
            )
            self.logger.info("Recovered key %r from known plaintext", key)
            return key

    # ------------------------------------------------------------------ #
    #  Caesar
    # ------------------------------------------------------------------ #

    def crack_caesar(self, ciphertext: str) -> CaesarResult:
        """Try every shift and rank the decryptions by chi-squared score."""
        with self.logger.operation("caesar_crack"), self.logger.timed("caesar crack"):
            ranking = caesar.rank(ciphertext, self.language)
            candidates = [
                CaesarCandidate(
                    key=key,
                    shift=key_offset(key, self.language),
                    plaintext=plain,
                    score=score,
                )
                for key, plain, score in ranking
            ]
            best = candidates[0]
            self.logger.info(
                "Best Caesar key %r (shift %d), chi-squared %.3f",
                best.key, best.shift, best.score,
            )
            return CaesarResult(
                language=self.language_name,
                key=best.key,
                shift=best.shift,
                plaintext=best.plaintext,
                score=best.score,
                candidates=candidates,
            )

    # ------------------------------------------------------------------ #
    #  Vigenere
    # ------------------------------------------------------------------ #

    def guess_period(
        self,
        ciphertext: str,
        repetition_lengths: Optional[Iterable[int]] = None,
    ) -> PeriodReport:
        """Kasiski examination over a range of repetition lengths."""
        lengths = self._lengths(repetition_lengths)
        clean = self.language.clean(ciphertext)
        with self.logger.operation("period_guess"):
            guesses = []
            for length in lengths:
                gaps = gap_histogram(clean, length)
                key_length = key_length_from_gaps(gaps)
                self.logger.debug(
                    "Repetition length %d: %d distinct gaps, key length %s",
                    length, len(gaps), key_length,
                )
                guesses.append(PeriodGuess(
                    repetition_length=length,
                    key_length=key_length,
                    gaps=dict(sorted(gaps.items())),
                ))
            return PeriodReport(
                language=self.language_name,
                text_length=len(clean),
                guesses=guesses,
            )

    def crack_vigenere(
        self,
        ciphertext: str,
        repetition_lengths: Optional[Iterable[int]] = None,
    ) -> Optional[VigenereResult]:
        """Guess the period, break each column, keep the best plaintext.

        Returns ``None`` if no repetition length found a repeated
        substring.
        """
        lengths = self._lengths(repetition_lengths)
        report = self.guess_period(ciphertext, lengths)
        with self.logger.operation("vigenere_crack"), self.logger.timed("vigenere crack"):
            best = vigenere.best_scored_guess(ciphertext, self.language, lengths)
            if best is None:
                self.logger.warning("No repeated substrings found; no key length guess")
                return None

            repetition_length, key, plaintext, score = best
            self.logger.info(
                "Best Vigenere key %r (length %d), chi-squared %.3f",
                key, len(key), score,
            )
            return VigenereResult(
                language=self.language_name,
                key=key,
                key_length=len(key),
                plaintext=plaintext,
                score=score,
                repetition_length=repetition_length,
                periods=report.guesses,
            )

    # ------------------------------------------------------------------ #
    #  Brute force
    # ------------------------------------------------------------------ #

    def brute_force(
        self,
        ciphertext: str,
        key_length: Optional[int] = None,
        keys: Optional[Iterable[str]] = None,
        top: Optional[int] = None,
    ) -> BruteForceReport:
        """Score every candidate key and keep the *top* best.

        Candidates are either all keys of *key_length* or the supplied
        *keys*; exactly one must be given.

        Raises:
            ValueError: Neither or both sources given, or *key_length*
                exceeds ``config.breaker.max_brute_force_length``.
        """
        if (key_length is None) == (keys is None):
            raise ValueError("Give exactly one of key_length or keys")
        limit = self.config.breaker.max_brute_force_length
        if key_length is not None and key_length > limit:
            raise ValueError(
                f"Key length {key_length} exceeds the brute-force limit of {limit}"
            )
        top = top or self.config.breaker.brute_force_top

        if keys is None:
            keys = brute.all_keys(key_length, self.language)

        tried = 0

        def counted(candidates: Iterable[str]) -> Iterable[str]:
            nonlocal tried
            for key in candidates:
                tried += 1
                yield key

        with self.logger.operation("brute_force"), self.logger.timed("brute force"):
            results = brute.scan(ciphertext, counted(keys), self.language)
            best = brute.best_candidates(results, top)
            self.logger.info("Scored %d candidate keys", tried)

        return BruteForceReport(
            language=self.language_name,
            key_length=key_length,
            candidates_tried=tried,
            best=[
                BruteForceCandidate(key=k, plaintext=p, score=s) for k, p, s in best
            ],
        )

    # ------------------------------------------------------------------ #
    #  Helpers
    # ------------------------------------------------------------------ #

    def _lengths(self, repetition_lengths: Optional[Iterable[int]]) -> list[int]:
        if repetition_lengths is None:
            return list(self.config.breaker.repetition_lengths)
        return list(repetition_lengths)
