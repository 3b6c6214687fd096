"""Normalized endpoint model.

The collector builds these from declarations; writers only read them.
All models are frozen.
"""

from pydantic import BaseModel, ConfigDict, field_validator


def _unique(values) -> tuple[str, ...]:
    # insertion ordered set
    return tuple(dict.fromkeys(values or ()))


def erase_type(type_name: str) -> str:
    """Drop type arguments and array dimensions: ``java.util.List<a.B>[]`` -> ``java.util.List``."""
    erased = type_name.split("<", 1)[0].strip()
    while erased.endswith("[]") or erased.endswith("..."):
        erased = erased[:-2] if erased.endswith("[]") else erased[:-3]
        erased = erased.rstrip()
    return erased


def simple_type_name(type_name: str) -> str:
    return erase_type(type_name).rsplit(".", 1)[-1]


class TypeRef(BaseModel):
    """Reference to a declared parameter type."""

    model_config = ConfigDict(frozen=True)

    qualified_name: str

    @property
    def erased_name(self) -> str:
        return erase_type(self.qualified_name)

    @property
    def simple_name(self) -> str:
        return simple_type_name(self.qualified_name)


class EndpointMapping(BaseModel):
    """Paths, HTTP methods and content types declared on one class or method."""

    model_config = ConfigDict(frozen=True)

    paths: tuple[str, ...] = ()
    http_methods: tuple[str, ...] = ()
    consumes: tuple[str, ...] = ()
    produces: tuple[str, ...] = ()

    @field_validator("paths", "http_methods", "consumes", "produces", mode="before")
    @classmethod
    def _dedupe(cls, value):
        return _unique(value)


class PathVar(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    type: TypeRef


class QueryParam(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    required: bool
    description: str = ""
    type: TypeRef


class RequestBody(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    type: TypeRef


class Endpoint(BaseModel):
    """One (path, HTTP method) combination of a handler method."""

    model_config = ConfigDict(frozen=True)

    http_method: str  # GET / POST / PUT / DELETE / PATCH
    path: str  # /users/{id}
    description: str = ""
    path_vars: tuple[PathVar, ...] = ()
    query_params: tuple[QueryParam, ...] = ()
    request_body: RequestBody | None = None
    consumes: tuple[str, ...] = ()
    produces: tuple[str, ...] = ()


class ClassDescriptor(BaseModel):
    """An included controller class and its endpoints."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    endpoints: tuple[Endpoint, ...] = ()
