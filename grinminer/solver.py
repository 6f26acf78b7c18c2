"""Data exchanged with solver plugins: parameters, statistics and solutions."""

import hashlib
from dataclasses import dataclass, field

PROOFSIZE = 42
MAX_NAME_LEN = 256
MAX_SOLS = 4


def decode_name(raw) -> str:
    """Decode a NUL-terminated name buffer.

    A buffer without any NUL byte yields an empty string.
    """
    data = bytes(raw)
    end = data.find(b"\0")
    if end < 0:
        end = 0
    return data[:end].decode("utf-8")


def _name_buffer() -> bytearray:
    return bytearray(MAX_NAME_LEN)


@dataclass
class SolverParams:
    """Common parameters for a solver."""

    nthreads: int = 0
    ntrims: int = 0
    showcycle: bool = True
    allrounds: bool = False
    mutate_nonce: bool = False
    cpuload: bool = True
    device: int = 0
    blocks: int = 0
    tpb: int = 0
    expand: int = 0
    genablocks: int = 0
    genatpb: int = 0
    genbtpb: int = 0
    trimtpb: int = 0
    tailtpb: int = 0
    recoverblocks: int = 0
    recovertpb: int = 0
    platform: int = 0
    edge_bits: int = 31


@dataclass
class SolverStats:
    """Statistics reported by a solver; names are NUL-terminated buffers."""

    device_id: int = 0
    edge_bits: int = 0
    plugin_name: bytearray = field(default_factory=_name_buffer)
    device_name: bytearray = field(default_factory=_name_buffer)
    has_errored: bool = False
    error_reason: bytearray = field(default_factory=_name_buffer)
    iterations: int = 0
    last_start_time: int = 0
    last_end_time: int = 0
    last_solution_time: int = 0

    def set_plugin_name(self, name: str) -> None:
        """Write ``name`` over the start of the plugin name buffer."""
        encoded = name.encode("utf-8")
        if b"\0" in encoded:
            raise ValueError("plugin name may not contain NUL bytes")
        if len(encoded) > MAX_NAME_LEN:
            raise ValueError(f"plugin name longer than {MAX_NAME_LEN} bytes")
        self.plugin_name[: len(encoded)] = encoded


@dataclass(eq=False)
class Solution:
    """A single proof-of-work solution; equality depends on the proof only."""

    id: int = 0
    nonce: int = 0
    proof: list = field(default_factory=lambda: [0] * PROOFSIZE)

    def __post_init__(self):
        self.proof = list(self.proof)
        if len(self.proof) != PROOFSIZE:
            raise ValueError(f"proof must hold {PROOFSIZE} nonces, got {len(self.proof)}")

    def __eq__(self, other):
        if not isinstance(other, Solution):
            return NotImplemented
        return self.proof == other.proof

    def __hash__(self):
        return hash(tuple(self.proof))

    def __str__(self):
        nonces = ", ".join(f"0x{n:X}" for n in self.proof)
        return f"Nonce:{self.nonce} [{nonces}]"

    def __repr__(self):
        return repr(self.proof)

    def to_u64s(self) -> list:
        """Return the proof as a new list of integers."""
        return list(self.proof)

    def hash(self) -> bytes:
        """Blake2b-256 of the proof nonces, each as a big-endian 32-bit value."""
        digest = hashlib.blake2b(digest_size=32)
        for n in self.proof:
            digest.update((n & 0xFFFFFFFF).to_bytes(4, "big"))
        return digest.digest()


@dataclass
class SolverSolutions:
    """The solutions returned by one solver run."""

    edge_bits: int = 0
    num_sols: int = 0
    sols: list = field(default_factory=lambda: [Solution() for _ in range(MAX_SOLS)])