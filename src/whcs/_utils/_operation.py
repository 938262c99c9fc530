import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


class ParameterRole(str, Enum):
    PATH = "path"
    QUERY = "query"
    BODY_FIELD = "body-field"
    BODY = "body"
    FORM_FIELD = "form-field"
    HEADER = "header"


class ArrayFormat(str, Enum):
    """How list values of a query parameter go on the wire."""

    MULTI = "multi"
    CSV = "csv"


_PLACEHOLDER = re.compile(r"{([^{}]+)}")


@dataclass(frozen=True)
class ParameterSpec:
    """Static description of one operation parameter.

    ``name`` is the keyword callers use, ``wire_name`` the key that ends up in
    the path, query string, JSON body, form data or header map.
    """

    name: str
    role: ParameterRole
    required: bool = False
    wire_name: Optional[str] = None
    array_format: ArrayFormat = ArrayFormat.MULTI
    raw_body: bool = False
    content_type_param: Optional[str] = None

    def __post_init__(self) -> None:
        if self.wire_name is None:
            object.__setattr__(self, "wire_name", self.name)
        if self.role is ParameterRole.HEADER and self.required:
            raise ValueError(f"Header parameter '{self.name}' cannot be required")

    @property
    def key(self) -> str:
        return self.wire_name or self.name


@dataclass(frozen=True)
class OperationSpec:
    """Static description of one remote operation."""

    name: str
    method: str
    path: str
    parameters: Tuple[ParameterSpec, ...] = ()
    accept: Optional[str] = None
    content_type: Optional[str] = None
    operation_id: str = ""
    versioned: bool = True
    summary: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        if self.method not in ("GET", "POST", "PUT", "DELETE"):
            raise ValueError(f"Unsupported HTTP method '{self.method}' for {self.name}")

        names = [p.name for p in self.parameters]
        if len(names) != len(set(names)):
            raise ValueError(f"Duplicate parameter names in operation {self.name}")

        placeholders = set(_PLACEHOLDER.findall(self.path))
        path_params = {p.key for p in self.parameters if p.role is ParameterRole.PATH}
        if placeholders != path_params:
            raise ValueError(
                f"Path template '{self.path}' of {self.name} does not match its "
                f"path parameters {sorted(path_params)}"
            )

        bodies = [p for p in self.parameters if p.role is ParameterRole.BODY]
        fields = [p for p in self.parameters if p.role is ParameterRole.BODY_FIELD]
        if len(bodies) > 1 or (bodies and fields):
            raise ValueError(
                f"Operation {self.name} mixes an opaque body with body fields"
            )

        if not self.operation_id:
            object.__setattr__(self, "operation_id", _camel_case(self.name))

    @property
    def required_names(self) -> Tuple[str, ...]:
        return tuple(p.name for p in self.parameters if p.required)

    def parameter(self, name: str) -> ParameterSpec:
        for param in self.parameters:
            if param.name == name:
                return param
        raise KeyError(name)

    def by_role(self, role: ParameterRole) -> Tuple[ParameterSpec, ...]:
        return tuple(p for p in self.parameters if p.role is role)


def _camel_case(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


# shorthands used by the operation tables
def path(name: str, wire_name: Optional[str] = None) -> ParameterSpec:
    return ParameterSpec(name, ParameterRole.PATH, required=True, wire_name=wire_name)


def query(
    name: str,
    wire_name: Optional[str] = None,
    *,
    required: bool = False,
    array_format: ArrayFormat = ArrayFormat.MULTI,
) -> ParameterSpec:
    return ParameterSpec(
        name,
        ParameterRole.QUERY,
        required=required,
        wire_name=wire_name,
        array_format=array_format,
    )


def body_field(name: str, wire_name: Optional[str] = None) -> ParameterSpec:
    return ParameterSpec(name, ParameterRole.BODY_FIELD, wire_name=wire_name)


def body(name: str, *, required: bool = False, raw: bool = True) -> ParameterSpec:
    return ParameterSpec(name, ParameterRole.BODY, required=required, raw_body=raw)


def form_field(
    name: str, wire_name: Optional[str] = None, *, content_type_param: Optional[str] = None
) -> ParameterSpec:
    return ParameterSpec(
        name,
        ParameterRole.FORM_FIELD,
        wire_name=wire_name,
        content_type_param=content_type_param,
    )


def header(name: str, wire_name: str) -> ParameterSpec:
    return ParameterSpec(name, ParameterRole.HEADER, wire_name=wire_name)
