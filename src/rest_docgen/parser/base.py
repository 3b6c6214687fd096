"""Declaration models for parsed source metadata.

A front end dumps classes, methods, parameters, annotations and
documentation tags into these models. The collector only talks to them
through ``get_annotation`` / ``has_annotation`` / ``get_tags`` so any
front end that fills them in can be plugged in.
"""

from pydantic import BaseModel, field_validator


def _as_strings(value) -> list[str]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [str(v) for v in value if v is not None]
    return [str(value)]


class Annotation(BaseModel):
    """An annotation with its named element values."""

    name: str  # fully qualified, e.g. org.springframework.web.bind.annotation.RequestMapping
    elements: dict[str, list[str]] = {}

    @field_validator("elements", mode="before")
    @classmethod
    def _coerce_elements(cls, value):
        if not value:
            return {}
        return {str(k): _as_strings(v) for k, v in value.items()}


class Tag(BaseModel):
    """A documentation tag, e.g. ``@pathVar id the user id``."""

    kind: str
    text: str = ""


class ParamTag(BaseModel):
    """A standard ``@param`` tag."""

    name: str
    comment: str = ""


class AnnotatedDeclaration(BaseModel):
    annotations: list[Annotation] = []

    def get_annotation(self, name: str) -> dict[str, list[str]] | None:
        """Return the element values of the first annotation called ``name``."""
        for annotation in self.annotations:
            if annotation.name == name:
                return annotation.elements
        return None

    def has_annotation(self, name: str) -> bool:
        return any(a.name == name for a in self.annotations)


class Parameter(AnnotatedDeclaration):
    name: str
    type: str  # qualified type name


class Method(AnnotatedDeclaration):
    name: str
    comment: str = ""
    tags: list[Tag] = []
    param_tags: list[ParamTag] = []
    parameters: list[Parameter] = []

    def get_tags(self, kind: str) -> list[Tag]:
        """Return the dedicated tags of ``kind`` in source order."""
        kind = kind.lstrip("@")
        return [t for t in self.tags if t.kind.lstrip("@") == kind]


class ClassDeclaration(AnnotatedDeclaration):
    name: str
    qualified_name: str = ""
    comment: str = ""
    methods: list[Method] = []


class Field(BaseModel):
    name: str
    type: str
    comment: str = ""


class TypeDeclaration(BaseModel):
    """Shape information for a parameter or field type."""

    qualified_name: str
    superclass: str | None = None
    fields: list[Field] = []
    methods: list[str] = []  # declared method names

    def has_setter(self, field_name: str) -> bool:
        setter = f"set{field_name}".lower()
        return any(m.lower() == setter for m in self.methods)


class DeclarationSet(BaseModel):
    """Everything the front end extracted from one source tree."""

    classes: list[ClassDeclaration] = []
    types: list[TypeDeclaration] = []

    def find_type(self, qualified_name: str) -> TypeDeclaration | None:
        for type_decl in self.types:
            if type_decl.qualified_name == qualified_name:
                return type_decl
        return None
