"""Request mapping resolution and class/method merge rules."""

from rest_docgen.collector.convention import Convention
from rest_docgen.model import EndpointMapping
from rest_docgen.parser.base import AnnotatedDeclaration

EMPTY_MAPPING = EndpointMapping()


def get_endpoint_mapping(declaration: AnnotatedDeclaration, convention: Convention) -> EndpointMapping:
    """Extract the mapping annotation of a class or method.

    A declaration without the mapping annotation yields an empty mapping.
    """
    elements = declaration.get_annotation(convention.mapping_annotation)
    if elements is None:
        return EMPTY_MAPPING

    # RequestMethod.POST -> POST
    http_methods = [value.rsplit(".", 1)[-1] for value in elements.get("method", [])]

    return EndpointMapping(
        paths=elements.get("value", []),
        http_methods=http_methods,
        consumes=elements.get("consumes", []),
        produces=elements.get("produces", []),
    )


def first_non_empty(*candidates: tuple[str, ...]) -> tuple[str, ...]:
    for candidate in candidates:
        if candidate:
            return candidate
    return ()


def resolve_paths(class_mapping: EndpointMapping, method_mapping: EndpointMapping) -> tuple[str, ...]:
    """Concatenate every class path with every method path."""
    class_paths = class_mapping.paths or ("",)
    method_paths = method_mapping.paths or ("",)
    paths = [class_path + method_path for class_path in class_paths for method_path in method_paths]
    return tuple(dict.fromkeys(paths))


def resolve_http_methods(
    class_mapping: EndpointMapping,
    method_mapping: EndpointMapping,
    default: str = "GET",
) -> tuple[str, ...]:
    """Method verbs win over class verbs; with neither, use ``default``."""
    return first_non_empty(method_mapping.http_methods, class_mapping.http_methods, (default,))


def resolve_consumes(class_mapping: EndpointMapping, method_mapping: EndpointMapping) -> tuple[str, ...]:
    return first_non_empty(method_mapping.consumes, class_mapping.consumes)


def resolve_produces(class_mapping: EndpointMapping, method_mapping: EndpointMapping) -> tuple[str, ...]:
    return first_non_empty(method_mapping.produces, class_mapping.produces)
