"""EncryptionService — validation, key selection, and the shift transform.

Surface used by the interactive session and the one-shot commands:

* :meth:`EncryptionService.validate`
* :meth:`EncryptionService.encrypt_random`
* :meth:`EncryptionService.encrypt_manual`
* :meth:`EncryptionService.encrypt` (dispatch on a method code)

User mistakes never raise; they come back as failed results carrying one
of the ``*_CODE`` constants below.
"""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING

from symcipher.domain.keys import digit_length, parse_key, random_key
from symcipher.domain.transform import shift
from symcipher.domain.types import EncryptionMethod
from symcipher.domain.validation import first_invalid
from symcipher.services.result import ServiceResult

if TYPE_CHECKING:
    from symcipher.config.settings import SymcipherSettings

logger = logging.getLogger(__name__)

EMPTY_INPUT = "EMPTY_INPUT"
NON_ALPHABETIC_INPUT = "NON_ALPHABETIC_INPUT"
INVALID_METHOD = "INVALID_METHOD"
KEY_LENGTH_MISMATCH = "KEY_LENGTH_MISMATCH"
INVALID_KEY = "INVALID_KEY"
KEY_REQUIRED = "KEY_REQUIRED"

KEY_LENGTH_MESSAGE = "Key is not the same length as the input."


class EncryptionService:
    """Encrypts text over the 27-symbol alphabet.

    Args:
        rng: Random source for generated keys. Defaults to a fresh
            OS-seeded :class:`random.Random`.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    @classmethod
    def from_settings(cls, settings: SymcipherSettings) -> EncryptionService:
        """Build a service whose random source honours ``[keys] seed``."""
        return cls(random.Random(settings.keys.seed))

    # ── Validation ────────────────────────────────────────────────────

    def validate(self, text: str) -> ServiceResult:
        """Check that *text* is non-empty and alphabet-only."""
        op = "validate"
        if not text:
            return ServiceResult.failure(op, EMPTY_INPUT, "No text entered.")
        bad = first_invalid(text)
        if bad is not None:
            position, char = bad
            logger.debug("Non-alphabetic input at position %d: %r", position, char)
            return ServiceResult.failure(
                op,
                NON_ALPHABETIC_INPUT,
                "Non-alphabetic character detected.",
                position=position,
                char=char,
            )
        return ServiceResult(ok=True, op=op, data={"text": text, "valid": True, "length": len(text)})

    # ── Encryption ────────────────────────────────────────────────────

    def encrypt(
        self,
        text: str,
        method: str | EncryptionMethod,
        key: int | str | None = None,
    ) -> ServiceResult:
        """Validate *text*, then encrypt it with the selected key strategy."""
        checked = self.validate(text)
        if not checked.ok:
            return checked.model_copy(update={"op": "encrypt"})

        resolved = method if isinstance(method, EncryptionMethod) else EncryptionMethod.parse(method)
        if resolved is None:
            return ServiceResult.failure(
                "encrypt", INVALID_METHOD, "Invalid method selected.", method=str(method)
            )
        if resolved is EncryptionMethod.RANDOM:
            return self.encrypt_random(text)
        if key is None:
            return ServiceResult.failure(
                "encrypt_manual", KEY_REQUIRED, "A key is required for manual encryption."
            )
        return self.encrypt_manual(text, key)

    def encrypt_random(self, text: str) -> ServiceResult:
        """Encrypt with a generated key of ``len(text)`` digits."""
        op = "encrypt_random"
        if not text:
            return ServiceResult.failure(op, EMPTY_INPUT, "No text entered.")
        key = random_key(len(text), self._rng)
        return self._encrypted(op, EncryptionMethod.RANDOM, text, key)

    def encrypt_manual(self, text: str, key: int | str) -> ServiceResult:
        """Encrypt with a caller-supplied key.

        The key must have exactly as many digits as *text* has
        characters; otherwise the transform is not run.
        """
        op = "encrypt_manual"
        if isinstance(key, str):
            try:
                key = parse_key(key)
            except ValueError:
                return ServiceResult.failure(
                    op, INVALID_KEY, "Key must be a non-negative integer.", key=key
                )
        elif key < 0:
            return ServiceResult.failure(
                op, INVALID_KEY, "Key must be a non-negative integer.", key=key
            )

        if digit_length(key) != len(text):
            logger.debug(
                "Key length mismatch: %d digits for %d characters", digit_length(key), len(text)
            )
            return ServiceResult.failure(
                op,
                KEY_LENGTH_MISMATCH,
                KEY_LENGTH_MESSAGE,
                key_length=digit_length(key),
                text_length=len(text),
            )
        return self._encrypted(op, EncryptionMethod.MANUAL, text, key)

    def _encrypted(
        self, op: str, method: EncryptionMethod, text: str, key: int
    ) -> ServiceResult:
        ciphertext = shift(text, key)
        logger.debug("%s encryption of %d characters", method.label, len(text))
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "method": method.label.lower(),
                "text": text,
                "ciphertext": ciphertext,
                "key": key,
            },
        )
