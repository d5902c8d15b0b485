from __future__ import annotations

import hashlib
import json
import logging
import random
from dataclasses import dataclass
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class RandomLike(Protocol):
    """The two draws the dungeon generator needs from a random source."""

    def randint(self, a: int, b: int) -> int: ...
    def coin(self) -> bool: ...


@dataclass
class RandomSource:
    """
    A thin wrapper around random.Random to:
    - centralize RNG handling
    - support optional deterministic seeding for tests
    - derive independent child sources per domain
    """

    seed: int | None = None

    def __post_init__(self) -> None:
        if self.seed is not None:
            self._rng = random.Random(self.seed)
            logger.debug("Initialized RandomSource with deterministic seed=%s", self.seed)
        else:
            self._rng = random.Random()
            logger.debug("Initialized RandomSource with non-deterministic seed")

    def randint(self, a: int, b: int) -> int:
        """Uniform integer in [a, b], both ends inclusive."""
        return self._rng.randint(a, b)

    def coin(self) -> bool:
        """Unbiased coin flip."""
        return self._rng.random() < 0.5

    def derive(self, domain: str, *identifiers: Any) -> "RandomSource":
        """Child source whose seed depends only on (seed, domain, identifiers).

        Unseeded sources draw the child seed from their own stream instead.
        """
        if self.seed is None:
            return RandomSource(self._rng.getrandbits(64))
        payload = json.dumps(
            {"seed": self.seed, "domain": domain, "ids": identifiers},
            sort_keys=True,
            separators=(",", ":"),
        ).encode("utf-8")
        child = int.from_bytes(hashlib.blake2b(payload, digest_size=8).digest(), "big")
        logger.debug("Derived seed for domain=%s ids=%s -> %d", domain, identifiers, child)
        return RandomSource(child)


__all__ = ["RandomLike", "RandomSource"]
