"""
Short-code generation for the Shortlink Platform.

Provided generators:
- RandomCodeGenerator: 6 characters, each drawn uniformly from Base62 [0-9A-Za-z]

Notes:
- Generators are stateless and never check uniqueness; the Registry retries
  against the store until a free code is found.
- 62^6 (~5.68e10) possible codes keeps collisions rare while codes stay short,
  and Base62 needs no escaping inside a URL path segment.
"""

import random
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass

CODE_ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
CODE_LENGTH = 6

_CODE_PATTERN = re.compile(r"^[0-9A-Za-z]{%d}$" % CODE_LENGTH)


def is_valid_code(code: object) -> bool:
    """True when `code` has the shape of a generated short code."""
    return isinstance(code, str) and bool(_CODE_PATTERN.match(code))


class BaseCodeGenerator(ABC):
    """Abstract base for code generators."""

    @abstractmethod
    def generate(self) -> str:  # pragma: no cover
        """Return a candidate short code."""
        raise NotImplementedError


@dataclass(frozen=True)
class RandomCodeGenerator(BaseCodeGenerator):
    """Random Base62 codes; uniqueness is enforced by the store's unique index plus retry."""

    def generate(self) -> str:
        rng = random.SystemRandom()
        return "".join(rng.choice(CODE_ALPHABET) for _ in range(CODE_LENGTH))
