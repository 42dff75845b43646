"""Positional parameter contracts for RPC commands.

Manifesto:
    Commands must validate inputs before executing.  A contract declares
    each positional parameter once (name, type, required, enum set,
    default source) so every command rejects malformed input the same way
    and reports the same errors.

The validation pipeline runs in a fixed order and stops at the first
violation, in parameter-index order:

1. presence of required parameters, then the contract's guards
2. runtime type of each present value
3. enum membership (case-sensitive member names)
4. default-fill of optional parameters from another slot

Only step 4 mutates the request, and re-running it is a no-op.

Tags:
    framework, params, validation, contract, rpc

Doc-Types:
    api-reference
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from marketrpc.core.enums import contains_name, member_names
from marketrpc.core.errors import ContractError, InvalidParameterTypeError, MissingParameterError
from marketrpc.framework.request import RpcRequest


class ParamType(str, Enum):
    """Expected primitive type of a positional parameter."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ENUM = "enum"


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a number on the wire
    return isinstance(value, (int, float)) and not isinstance(value, bool)


_TYPE_CHECKS: dict[ParamType, Callable[[Any], bool]] = {
    ParamType.STRING: lambda value: isinstance(value, str),
    ParamType.NUMBER: _is_number,
    ParamType.BOOLEAN: lambda value: isinstance(value, bool),
    ParamType.ENUM: lambda value: isinstance(value, str),
}


@dataclass(frozen=True)
class ParamDef:
    """Definition of one positional parameter."""

    index: int
    name: str
    type: ParamType
    description: str = ""
    required: bool = True
    enum: type[Enum] | None = None
    default_from: int | None = None

    @property
    def primitive_type(self) -> str:
        """Wire-level type name; enums travel as strings."""
        return ParamType.STRING.value if self.type is ParamType.ENUM else self.type.value

    @property
    def expected_type(self) -> str:
        """Type name used in error messages (the enum class name for enums)."""
        if self.type is ParamType.ENUM and self.enum is not None:
            return self.enum.__name__
        return self.type.value

    def is_supplied(self, params: Sequence[Any]) -> bool:
        """Whether the request carries a value that must be type-checked.

        Required slots count as supplied whenever they exist; optional slots
        only when they hold a truthy value.
        """
        if self.index >= len(params):
            return False
        return self.required or bool(params[self.index])

    def matches_type(self, value: Any) -> bool:
        """Check the runtime type of ``value`` (enum membership excluded)."""
        return _TYPE_CHECKS[self.type](value)

    def usage_token(self) -> str:
        return f"<{self.name}>" if self.required else f"[{self.name}]"


@dataclass(frozen=True)
class ParamGuard:
    """
    Extra presence rule evaluated after the required-parameter checks.

    When ``predicate(params)`` is true, validation fails with
    ``MissingParameterError(param_name)``. Guards cover layouts where an
    optional parameter is only meaningful together with another one.
    """

    param_name: str
    predicate: Callable[[Sequence[Any]], bool]
    description: str = ""

    def check(self, params: Sequence[Any]) -> None:
        if self.predicate(params):
            raise MissingParameterError(self.param_name)


def length_equals(length: int, param_name: str) -> ParamGuard:
    """Guard that fails when exactly ``length`` parameters were supplied."""
    return ParamGuard(
        param_name=param_name,
        predicate=lambda params: len(params) == length,
        description=f"{length} parameters given, {param_name} missing",
    )


def _slot_given(params: Sequence[Any], index: int) -> bool:
    # Falsy optional values count as absent, as in default-fill
    return index < len(params) and bool(params[index])


def requires_slot(index: int, other: int, param_name: str) -> ParamGuard:
    """Guard that fails when slot ``index`` holds a value but slot ``other`` does not."""

    def predicate(params: Sequence[Any]) -> bool:
        return _slot_given(params, index) and not _slot_given(params, other)

    return ParamGuard(
        param_name=param_name,
        predicate=predicate,
        description=f"slot {index} given without slot {other}",
    )


@dataclass(frozen=True)
class CommandContract:
    """
    Ordered positional parameter contract of one command.

    Invariants (checked at construction, ``ContractError`` otherwise):
        - indices are unique and contiguous from 0
        - no required parameter follows an optional one
        - ``default_from`` points at an existing lower index
        - enum parameters carry their enum class
    """

    params: tuple[ParamDef, ...] = ()
    guards: tuple[ParamGuard, ...] = ()
    examples: tuple[str, ...] = field(default=(), compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", tuple(sorted(self.params, key=lambda p: p.index)))
        object.__setattr__(self, "guards", tuple(self.guards))
        object.__setattr__(self, "examples", tuple(self.examples))
        self._check_layout()

    def _check_layout(self) -> None:
        indices = [p.index for p in self.params]
        if indices != list(range(len(indices))):
            raise ContractError(f"Parameter indices must be unique and contiguous from 0, got {indices}")

        seen_optional = False
        for param in self.params:
            if not param.required:
                seen_optional = True
            elif seen_optional:
                raise ContractError(f"Required parameter '{param.name}' follows an optional parameter")

            if param.type is ParamType.ENUM and param.enum is None:
                raise ContractError(f"Enum parameter '{param.name}' has no enum class")

            if param.default_from is not None:
                if param.required:
                    raise ContractError(f"Required parameter '{param.name}' cannot declare default_from")
                if not 0 <= param.default_from < param.index:
                    raise ContractError(
                        f"Parameter '{param.name}' defaults from index {param.default_from}, "
                        f"which is not a lower parameter"
                    )

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def required_params(self) -> tuple[ParamDef, ...]:
        return tuple(p for p in self.params if p.required)

    @property
    def optional_params(self) -> tuple[ParamDef, ...]:
        return tuple(p for p in self.params if not p.required)

    def __getitem__(self, name: str) -> ParamDef:
        for param in self.params:
            if param.name == name:
                return param
        raise KeyError(name)

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def validate(self, request: RpcRequest) -> RpcRequest:
        """
        Validate ``request`` against this contract.

        Returns the same request, with optional defaults filled in.

        Raises:
            MissingParameterError: first absent required parameter, or a guard
            InvalidParameterTypeError: first type or enum-membership violation
        """
        params = request.params
        self._check_presence(params)
        self._check_types(params)
        self._check_enums(params)
        self._apply_defaults(params)
        return request

    def _check_presence(self, params: Sequence[Any]) -> None:
        for param in self.required_params:
            if len(params) <= param.index:
                raise MissingParameterError(param.name)
        for guard in self.guards:
            guard.check(params)

    def _check_types(self, params: Sequence[Any]) -> None:
        for param in self.params:
            if param.is_supplied(params) and not param.matches_type(params[param.index]):
                raise InvalidParameterTypeError(param.name, param.primitive_type)

    def _check_enums(self, params: Sequence[Any]) -> None:
        for param in self.params:
            if param.type is not ParamType.ENUM or not param.is_supplied(params):
                continue
            assert param.enum is not None
            if not contains_name(param.enum, params[param.index]):
                raise InvalidParameterTypeError(param.name, param.expected_type)

    def _apply_defaults(self, params: list[Any]) -> None:
        for param in self.optional_params:
            if param.default_from is None:
                continue
            if param.index < len(params) and params[param.index]:
                continue
            while len(params) <= param.index:
                params.append(None)
            params[param.index] = params[param.default_from]

    # ------------------------------------------------------------------
    # Help text
    # ------------------------------------------------------------------

    def usage_args(self) -> str:
        """Argument synopsis, e.g. ``<name> <type> [publishKey]``."""
        return " ".join(p.usage_token() for p in self.params)

    def get_help_text(self) -> str:
        """One line per parameter: name, type, description, default source."""
        lines = []
        width = max((len(p.usage_token()) for p in self.params), default=0)
        for param in self.params:
            type_name = param.expected_type
            if param.type is ParamType.ENUM and param.enum is not None:
                type_name = f"{type_name} ({', '.join(member_names(param.enum))})"
            line = f"    {param.usage_token():<{width}} - {type_name} - {param.description}".rstrip(" -")
            if param.default_from is not None:
                line += f" [default: {self.params[param.default_from].name}]"
            lines.append(line)
        return "\n".join(lines)


def validate(contract: CommandContract, request: RpcRequest) -> RpcRequest:
    """Validate ``request`` against ``contract`` (see ``CommandContract.validate``)."""
    return contract.validate(request)
