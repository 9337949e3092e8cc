"""JSONRPC-like request and response envelopes.

Requests self-describe their method; responses do not. A response is decoded
against the result type the caller expects from the request it sent, which
`Request.expected_result` reports.
"""

from __future__ import annotations

import json
import types
from typing import Annotated, Any, Generic, TypeVar, Union, get_args, get_origin

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, model_validator

from vaultrpc.bitcoin.primitives import U32_MAX
from vaultrpc.config.access import get_id_source
from vaultrpc.messages import coordinator, cosigner, watchtower
from vaultrpc.messages.dispatch import ShapeDispatcher, WireRecord, json_kind
from vaultrpc.messages.ids import IdSource
from vaultrpc.utils.exceptions import MalformedText, UnknownShape

CorrelationId = Annotated[int, Field(ge=0, le=U32_MAX)]

# Decoding priority order. Shapes are checked pairwise distinct at import.
REQUEST_PARAMS_VARIANTS: tuple[type[WireRecord], ...] = (
    watchtower.Sig,
    coordinator.SetSpendTx,
    coordinator.GetSpendTx,
    coordinator.Sig,
    coordinator.GetSigs,
    cosigner.SignRequest,
)

RequestParams = Union[
    watchtower.Sig,
    coordinator.SetSpendTx,
    coordinator.GetSpendTx,
    coordinator.Sig,
    coordinator.GetSigs,
    cosigner.SignRequest,
]

ResponseResult = Union[
    watchtower.SigResult,
    coordinator.Sigs,
    coordinator.SigResult,
    coordinator.SetSpendResult,
    coordinator.SpendTx,
    cosigner.SignResult,
]

EXPECTED_RESULTS: dict[type[WireRecord], type[WireRecord]] = {
    watchtower.Sig: watchtower.SigResult,
    coordinator.SetSpendTx: coordinator.SetSpendResult,
    coordinator.GetSpendTx: coordinator.SpendTx,
    coordinator.Sig: coordinator.SigResult,
    coordinator.GetSigs: coordinator.Sigs,
    cosigner.SignRequest: cosigner.SignResult,
}

REQUEST_MEMBERS = frozenset({"method", "params", "id"})
RESPONSE_MEMBERS = frozenset({"result", "id"})

_request_params = ShapeDispatcher("request params", REQUEST_PARAMS_VARIANTS)

ResultT = TypeVar("ResultT")


def _reject_duplicate_members(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    obj: dict[str, Any] = {}
    for key, value in pairs:
        if key in obj:
            raise MalformedText(f"duplicate member {key!r}")
        obj[key] = value
    return obj


def _reject_constant(name: str) -> Any:
    raise MalformedText(f"{name} is not a JSON value")


def load_object(text: str | bytes, members: frozenset[str], what: str) -> dict[str, Any]:
    """Parse one JSON message and check its envelope members (in any order)."""
    # ValueError also covers bad UTF-8 and integer literals past the int() digit limit
    try:
        if isinstance(text, (bytes, bytearray)):
            text = text.decode("utf-8")
        obj = json.loads(
            text,
            object_pairs_hook=_reject_duplicate_members,
            parse_constant=_reject_constant,
        )
    except (ValueError, RecursionError) as e:
        raise MalformedText(f"{what} is not valid JSON: {type(e).__name__}: {e}") from e
    if not isinstance(obj, dict):
        raise UnknownShape(f"{what} must be a JSON object", got=json_kind(obj))
    if set(obj) != members:
        raise UnknownShape(
            f"{what} members must be {sorted(members)}",
            members=sorted(obj),
        )
    return obj


def _correlation_id(value: Any) -> int:
    if json_kind(value) != "integer" or not 0 <= value <= U32_MAX:
        raise UnknownShape("id must be an unsigned 32-bit integer", id=repr(value))
    return value


def _flatten_results(spec: Any) -> tuple[type[WireRecord], ...]:
    if isinstance(spec, tuple):
        return tuple(variant for item in spec for variant in _flatten_results(item))
    if get_origin(spec) in (Union, types.UnionType):
        return _flatten_results(get_args(spec))
    if isinstance(spec, type) and issubclass(spec, WireRecord):
        return (spec,)
    raise TypeError(f"{spec!r} is not a result record type")


def _result_candidates(cls: type[Response[Any]], expected: Any) -> tuple[type[WireRecord], ...]:
    args = cls.__pydantic_generic_metadata__["args"]
    declared = _flatten_results(args[0]) if args else None
    if expected is None:
        if declared is None:
            raise TypeError("Response.from_wire needs the expected result type")
        return declared
    candidates = _flatten_results(expected)
    if declared is not None:
        outside = [variant.__name__ for variant in candidates if variant not in declared]
        if outside:
            raise TypeError(f"{cls.__name__} cannot hold {', '.join(outside)}")
    return candidates


class Request(BaseModel):
    """`{"method": ..., "params": ..., "id": ...}`."""

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    method: str
    params: RequestParams
    id: CorrelationId

    @model_validator(mode="after")
    def _method_matches_params(self) -> Request:
        if self.method != type(self.params).METHOD:
            raise ValueError(f"method {self.method!r} does not belong to {type(self.params).__name__}")
        return self

    @classmethod
    def from_params(
        cls,
        params: RequestParams,
        *,
        id: int | None = None,
        id_source: IdSource | None = None,
    ) -> Request:
        """Wrap a params record, drawing a fresh id unless one is given.

        Ids come from `id_source`, or else from the source the configuration
        selects (`ids.source`, secure random by default).
        """
        if not isinstance(params, REQUEST_PARAMS_VARIANTS):
            raise TypeError(f"{type(params).__name__} is not a request params record")
        if id is None:
            id = (id_source or get_id_source()).next_id()
        return cls(method=type(params).METHOD, params=params, id=id)

    @classmethod
    def from_wire(cls, text: str | bytes) -> Request:
        obj = load_object(text, REQUEST_MEMBERS, "request")
        method = obj["method"]
        if not isinstance(method, str):
            raise UnknownShape("method must be a string", got=json_kind(method))
        request_id = _correlation_id(obj["id"])
        params = _request_params.decode(obj["params"])
        if method != params.METHOD:
            raise UnknownShape(
                f"method {method!r} does not match params shape {type(params).__name__}",
                expected=params.METHOD,
            )
        logger.debug("Decoded request method={} id={}", method, request_id)
        return cls(method=method, params=params, id=request_id)

    def to_wire(self) -> str:
        text = self.model_dump_json()
        logger.trace("Encoded request {}", text)
        return text

    def expected_result(self) -> type[WireRecord]:
        """Result type a well-behaved peer answers this request with."""
        return EXPECTED_RESULTS[type(self.params)]


class Response(BaseModel, Generic[ResultT]):
    """`{"result": ..., "id": ...}`, id echoed from the request."""

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    result: ResultT
    id: CorrelationId

    @classmethod
    def from_wire(
        cls,
        text: str | bytes,
        expected: Any = None,
    ) -> Response[Any]:
        """Decode a response whose result must match `expected`.

        `expected` is a result type, a tuple of candidate types or a Union of
        them, tried in order; the candidates must have distinct wire shapes or
        ShapeCollisionError is raised. On a parametrized class such as
        `Response[Sigs]` it defaults to the type parameter and must not name
        anything outside it.
        """
        variants = _result_candidates(cls, expected)
        dispatcher = ShapeDispatcher("response result", variants)
        obj = load_object(text, RESPONSE_MEMBERS, "response")
        response_id = _correlation_id(obj["id"])
        result = dispatcher.decode(obj["result"])
        logger.debug("Decoded response id={}", response_id)
        return cls(result=result, id=response_id)

    def to_wire(self) -> str:
        text = self.model_dump_json()
        logger.trace("Encoded response {}", text)
        return text
