"""Stratum JSON-RPC payloads and messages passed between the client and the miner."""

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional


def _require_object(data, what: str) -> Mapping:
    if not isinstance(data, Mapping):
        raise ValueError(f"{what} must be a JSON object, got {type(data).__name__}")
    return data


def _field(data: Mapping, key: str):
    try:
        return data[key]
    except KeyError:
        raise ValueError(f"missing field `{key}`") from None


def _uint(data: Mapping, key: str, bits: int = 64) -> int:
    value = _field(data, key)
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value < 2**bits:
        raise ValueError(f"field `{key}` must be an unsigned {bits}-bit integer, got {value!r}")
    return value


def _int(data: Mapping, key: str, bits: int = 32) -> int:
    value = _field(data, key)
    limit = 2 ** (bits - 1)
    if isinstance(value, bool) or not isinstance(value, int) or not -limit <= value < limit:
        raise ValueError(f"field `{key}` must be a signed {bits}-bit integer, got {value!r}")
    return value


def _str(data: Mapping, key: str) -> str:
    value = _field(data, key)
    if not isinstance(value, str):
        raise ValueError(f"field `{key}` must be a string, got {value!r}")
    return value


@dataclass
class JobTemplate:
    """A mining job announced by the server."""

    height: int
    job_id: int
    difficulty: int
    pre_pow: str

    @classmethod
    def from_dict(cls, data) -> "JobTemplate":
        data = _require_object(data, "job template")
        return cls(
            height=_uint(data, "height"),
            job_id=_uint(data, "job_id"),
            difficulty=_uint(data, "difficulty"),
            pre_pow=_str(data, "pre_pow"),
        )


@dataclass
class RpcRequest:
    """A JSON-RPC request."""

    id: str
    jsonrpc: str
    method: str
    params: Optional[Any] = None

    @classmethod
    def from_dict(cls, data) -> "RpcRequest":
        data = _require_object(data, "request")
        return cls(
            id=_str(data, "id"),
            jsonrpc=_str(data, "jsonrpc"),
            method=_str(data, "method"),
            params=data.get("params"),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "jsonrpc": self.jsonrpc,
            "method": self.method,
            "params": self.params,
        }

    def to_json(self) -> str:
        """Compact JSON text of the request."""
        return json.dumps(self.to_dict(), separators=(",", ":"))


@dataclass
class RpcError:
    """The error member of a JSON-RPC response."""

    code: int
    message: str

    @classmethod
    def from_dict(cls, data) -> "RpcError":
        data = _require_object(data, "error")
        return cls(code=_int(data, "code"), message=_str(data, "message"))


@dataclass
class RpcResponse:
    """A JSON-RPC response; the method names the request it answers."""

    id: str
    method: str
    jsonrpc: str
    result: Optional[Any] = None
    error: Optional[RpcError] = None

    @classmethod
    def from_dict(cls, data) -> "RpcResponse":
        data = _require_object(data, "response")
        error = data.get("error")
        return cls(
            id=_str(data, "id"),
            method=_str(data, "method"),
            jsonrpc=_str(data, "jsonrpc"),
            result=data.get("result"),
            error=None if error is None else RpcError.from_dict(error),
        )


@dataclass
class LoginParams:
    """Parameters of a login request."""

    login: str
    password: str
    agent: str

    def to_dict(self) -> dict:
        return {"login": self.login, "pass": self.password, "agent": self.agent}


@dataclass
class SubmitParams:
    """Parameters of a share submission."""

    height: int
    job_id: int
    edge_bits: int
    nonce: int
    pow: list

    def to_dict(self) -> dict:
        return {
            "height": self.height,
            "job_id": self.job_id,
            "edge_bits": self.edge_bits,
            "nonce": self.nonce,
            "pow": list(self.pow),
        }


@dataclass
class WorkerStatus:
    """Status of this worker as reported by the server."""

    id: str
    height: int
    difficulty: int
    accepted: int
    rejected: int
    stale: int

    @classmethod
    def from_dict(cls, data) -> "WorkerStatus":
        data = _require_object(data, "worker status")
        return cls(
            id=_str(data, "id"),
            height=_uint(data, "height"),
            difficulty=_uint(data, "difficulty"),
            accepted=_uint(data, "accepted"),
            rejected=_uint(data, "rejected"),
            stale=_uint(data, "stale"),
        )


@dataclass(frozen=True)
class ReceivedJob:
    """Miner message: start working on a new job."""

    height: int
    job_id: int
    difficulty: int
    pre_pow: str


@dataclass(frozen=True)
class StopJob:
    """Miner message: pause the solvers."""


@dataclass(frozen=True)
class MinerShutdown:
    """Miner message: stop the solvers and exit."""


@dataclass(frozen=True)
class FoundSolution:
    """Client message: submit a solution to the server."""

    height: int
    job_id: int
    edge_bits: int
    nonce: int
    pow: tuple = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "pow", tuple(self.pow))


@dataclass(frozen=True)
class ClientShutdown:
    """Client message: stop the client."""