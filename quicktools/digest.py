"""Cryptographic digests of text under several algorithms."""

from __future__ import annotations

import asyncio
import hashlib
from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional, Union

from .errors import DigestBackendConfigurationError, ErrorCategory, ErrorRecord
from .structures import DigestAlgorithm

DigestValue = Union[str, ErrorRecord]
DigestResult = Dict[str, DigestValue]

DEFAULT_ALGORITHMS = tuple(DigestAlgorithm)


class DigestBackend(ABC):
    """Abstract adapter for the primitive that computes raw digests."""

    name = "abstract"

    @abstractmethod
    def digest(self, data: bytes, algorithm: DigestAlgorithm) -> bytes:
        """Return the raw digest bytes of ``data``."""


class HashlibDigestBackend(DigestBackend):
    """Backend built on :mod:`hashlib`."""

    name = "hashlib"

    def digest(self, data: bytes, algorithm: DigestAlgorithm) -> bytes:
        return hashlib.new(algorithm.hashlib_name, data).digest()


BACKENDS = {
    HashlibDigestBackend.name: HashlibDigestBackend,
}


def build_backend(name: str | None = None) -> DigestBackend:
    """Instantiate a digest backend by identifier (default: hashlib)."""

    identifier = (name or HashlibDigestBackend.name).strip().lower()
    backend_cls = BACKENDS.get(identifier)
    if backend_cls is None:
        raise DigestBackendConfigurationError(
            f"Unknown digest backend '{name}'. Available: {', '.join(sorted(BACKENDS))}."
        )
    return backend_cls()


def resolve_algorithm(name: Union[DigestAlgorithm, str]) -> Optional[DigestAlgorithm]:
    """Match an algorithm name such as ``SHA-256`` or ``sha256``."""

    if isinstance(name, DigestAlgorithm):
        return name
    wanted = str(name).strip().upper().replace("-", "").replace("_", "")
    for algorithm in DigestAlgorithm:
        if algorithm.value.replace("-", "") == wanted:
            return algorithm
    return None


def encode_text(text: str) -> bytes:
    """UTF-8 encode text, replacing unpaired surrogates with U+FFFD."""

    try:
        return text.encode("utf-8")
    except UnicodeEncodeError:
        repaired = text.encode("utf-16", "surrogatepass").decode("utf-16", "replace")
        return repaired.encode("utf-8")


def _request_key(name: Union[DigestAlgorithm, str]) -> str:
    if isinstance(name, DigestAlgorithm):
        return name.value
    return str(name)


async def _digest_one(
    data: bytes,
    name: Union[DigestAlgorithm, str],
    backend: DigestBackend,
) -> DigestValue:
    algorithm = resolve_algorithm(name)
    if algorithm is None:
        return ErrorRecord(
            category=ErrorCategory.UNSUPPORTED_ALGORITHM,
            message=f"Unsupported digest algorithm '{_request_key(name)}'.",
        )
    try:
        raw = await asyncio.to_thread(backend.digest, data, algorithm)
    except Exception as exc:
        return ErrorRecord(
            category=ErrorCategory.DIGEST,
            message=f"Error generating {algorithm.value} hash.",
            details=str(exc),
        )
    return raw.hex()


async def compute_digests(
    text: str,
    algorithms: Optional[Iterable[Union[DigestAlgorithm, str]]] = None,
    *,
    backend: Optional[DigestBackend] = None,
) -> DigestResult:
    """Digest ``text`` under each requested algorithm concurrently.

    The result maps every requested name (first occurrence order) to either
    its lowercase hexadecimal digest or an :class:`ErrorRecord`. A failure
    for one algorithm never affects the others.
    """

    requested: Dict[str, Union[DigestAlgorithm, str]] = {}
    for name in DEFAULT_ALGORITHMS if algorithms is None else algorithms:
        requested.setdefault(_request_key(name), name)

    active_backend = backend or build_backend()
    data = encode_text(text)
    keys: List[str] = list(requested)
    outcomes = await asyncio.gather(
        *(_digest_one(data, requested[key], active_backend) for key in keys)
    )
    return dict(zip(keys, outcomes))


def compute_digests_sync(
    text: str,
    algorithms: Optional[Iterable[Union[DigestAlgorithm, str]]] = None,
    *,
    backend: Optional[DigestBackend] = None,
) -> DigestResult:
    """Blocking wrapper around :func:`compute_digests` for synchronous callers."""

    return asyncio.run(compute_digests(text, algorithms, backend=backend))
