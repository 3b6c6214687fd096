"""Bean shape synthesizer.

Builds an example object for a parameter type out of its setter-backed
fields, descending into nested bean types. Used by writers to show what
a request body or complex query parameter looks like.
"""

import json

from rest_docgen.collector.convention import SPRING, Convention
from rest_docgen.model import erase_type, simple_type_name
from rest_docgen.parser.base import DeclarationSet, TypeDeclaration

CYCLE_MARKER = "(cycle)"


class BeanShapeSynthesizer:
    """Synthesizes nested field listings from a type graph."""

    def __init__(self, types: DeclarationSet | None = None, convention: Convention = SPRING):
        self.types = types
        self.convention = convention

    def is_leaf(self, qualified_name: str) -> bool:
        return self.convention.is_primitive_like(qualified_name)

    def synthesize(self, qualified_name: str) -> dict:
        """Return the shape of ``qualified_name`` as a nested dict.

        Leaf fields map to ``"[<SimpleType>]<field comment>"``. A field
        whose type is already being expanded further up maps to
        ``"[<SimpleType>](cycle)"`` instead of being expanded again.
        Arrays and parameterized types are expanded as their element or
        raw type.
        """
        root_type = erase_type(qualified_name)
        root: dict = {}
        worklist = [(root_type, root, frozenset({root_type}))]
        while worklist:
            type_name, target, ancestry = worklist.pop()
            type_decl = self._find(type_name)
            if type_decl is None:
                continue

            nested = []
            self._emit_fields(type_decl, target, ancestry, nested)

            # Superclass fields are flattened into the same object.
            if type_decl.superclass:
                superclass = self._find(erase_type(type_decl.superclass))
                if superclass is not None:
                    self._emit_fields(superclass, target, ancestry, nested)

            # A later field of the same name may have replaced a nested object.
            live = [
                (field_type, child, field_ancestry)
                for name, field_type, child, field_ancestry in nested
                if target.get(name) is child
            ]
            # Reversed so siblings are expanded in field order.
            worklist.extend(reversed(live))
        return root

    def render(self, qualified_name: str) -> str:
        return json.dumps(self.synthesize(qualified_name), indent=2, ensure_ascii=False)

    def _find(self, qualified_name: str) -> TypeDeclaration | None:
        if self.types is None:
            return None
        return self.types.find_type(qualified_name)

    def _emit_fields(self, type_decl: TypeDeclaration, target: dict, ancestry: frozenset, nested: list) -> None:
        for field in type_decl.fields:
            # Only fields with a setter
            if not type_decl.has_setter(field.name):
                continue

            field_type = erase_type(field.type)
            if self.is_leaf(field_type):
                target[field.name] = f"[{simple_type_name(field.type)}]{field.comment}"
            elif field_type in ancestry:
                target[field.name] = f"[{simple_type_name(field.type)}]{CYCLE_MARKER}"
            else:
                child: dict = {}
                target[field.name] = child
                nested.append((field.name, field_type, child, ancestry | {field_type}))
