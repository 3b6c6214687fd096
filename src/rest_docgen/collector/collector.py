"""Collector: turns annotated declarations into ClassDescriptors."""

import logging

from rest_docgen.collector.convention import SPRING, Convention
from rest_docgen.collector.mapping import (
    get_endpoint_mapping,
    resolve_consumes,
    resolve_http_methods,
    resolve_paths,
    resolve_produces,
)
from rest_docgen.collector.tags import (
    PATHVAR_TAG,
    QUERYPARAM_TAG,
    REQUESTBODY_TAG,
    find_param_comment,
    find_param_text,
    find_tag_text,
)
from rest_docgen.model import (
    ClassDescriptor,
    Endpoint,
    EndpointMapping,
    PathVar,
    QueryParam,
    RequestBody,
    TypeRef,
)
from rest_docgen.parser.base import ClassDeclaration, DeclarationSet, Method

logger = logging.getLogger(__name__)


class Collector:
    """Resolves controller classes and handler methods for one framework convention."""

    def __init__(self, convention: Convention = SPRING):
        self.convention = convention

    def collect(self, declarations: DeclarationSet) -> list[ClassDescriptor]:
        """Build one ClassDescriptor per included class, in input order."""
        descriptors = []
        for class_decl in declarations.classes:
            if self.should_ignore_class(class_decl):
                logger.debug("Skipping %s: no controller annotation", class_decl.name)
                continue
            descriptors.append(self._describe_class(class_decl))

        logger.info(
            "Collected %d endpoints from %d controllers",
            sum(len(d.endpoints) for d in descriptors),
            len(descriptors),
        )
        return descriptors

    def should_ignore_class(self, class_decl: ClassDeclaration) -> bool:
        """A class is kept only if it carries a controller annotation."""
        return not any(class_decl.has_annotation(name) for name in self.convention.controller_annotations)

    def should_ignore_method(self, method: Method, class_decl: ClassDeclaration) -> bool:
        """A method is kept only with a mapping and a method- or class-level response body marker."""
        has_mapping = method.has_annotation(self.convention.mapping_annotation)
        has_response_body = method.has_annotation(
            self.convention.response_body_annotation
        ) or class_decl.has_annotation(self.convention.response_body_annotation)
        return not has_mapping or not has_response_body

    def get_endpoint_mapping(self, declaration) -> EndpointMapping:
        return get_endpoint_mapping(declaration, self.convention)

    def resolve_http_methods(self, class_mapping: EndpointMapping, method_mapping: EndpointMapping) -> tuple[str, ...]:
        return resolve_http_methods(class_mapping, method_mapping, default=self.convention.default_http_method)

    def _describe_class(self, class_decl: ClassDeclaration) -> ClassDescriptor:
        class_mapping = self.get_endpoint_mapping(class_decl)

        endpoints: list[Endpoint] = []
        for method in class_decl.methods:
            if self.should_ignore_method(method, class_decl):
                logger.debug("Skipping %s.%s: not a response body handler", class_decl.name, method.name)
                continue
            endpoints.extend(self._method_endpoints(method, class_mapping))

        return ClassDescriptor(
            name=class_decl.name,
            description=class_decl.comment,
            endpoints=endpoints,
        )

    def _method_endpoints(self, method: Method, class_mapping: EndpointMapping) -> list[Endpoint]:
        method_mapping = self.get_endpoint_mapping(method)

        paths = resolve_paths(class_mapping, method_mapping)
        http_methods = self.resolve_http_methods(class_mapping, method_mapping)
        consumes = resolve_consumes(class_mapping, method_mapping)
        produces = resolve_produces(class_mapping, method_mapping)

        path_vars = self.generate_path_vars(method)
        query_params = self.generate_query_params(method)
        request_body = self.generate_request_body(method)

        return [
            Endpoint(
                http_method=http_method,
                path=path,
                description=method.comment,
                path_vars=path_vars,
                query_params=query_params,
                request_body=request_body,
                consumes=consumes,
                produces=produces,
            )
            for path in paths
            for http_method in http_methods
        ]

    def generate_path_vars(self, method: Method) -> list[PathVar]:
        tags = method.get_tags(PATHVAR_TAG)
        result = []
        for param in method.parameters:
            elements = param.get_annotation(self.convention.path_variable_annotation)
            if elements is None:
                continue

            name = _first_value(elements, "value") or param.name

            # dedicated tag, then @param, then nothing
            text = find_tag_text(tags, name)
            if text is None:
                text = find_param_text(method.param_tags, param.name)

            result.append(PathVar(name=name, description=text or "", type=TypeRef(qualified_name=param.type)))
        return result

    def generate_query_params(self, method: Method) -> list[QueryParam]:
        tags = method.get_tags(QUERYPARAM_TAG)
        result = []
        for param in method.parameters:
            if not param.annotations:
                # Unannotated parameters bind to a required request parameter.
                result.append(
                    QueryParam(
                        name=param.name,
                        required=True,
                        description=find_param_comment(method.param_tags, param.name),
                        type=TypeRef(qualified_name=param.type),
                    )
                )
                continue

            elements = param.get_annotation(self.convention.query_param_annotation)
            if elements is None:
                continue

            name = _first_value(elements, "value") or param.name

            required = True
            required_value = _first_value(elements, "required")
            if required_value is not None:
                required = required_value.strip().lower() == "true"

            text = find_tag_text(tags, name)
            if text is None:
                text = find_param_text(method.param_tags, name)

            result.append(
                QueryParam(
                    name=name,
                    required=required,
                    description=text or "",
                    type=TypeRef(qualified_name=param.type),
                )
            )
        return result

    def generate_request_body(self, method: Method) -> RequestBody | None:
        """The first request body parameter wins; later ones are ignored."""
        tags = method.get_tags(REQUESTBODY_TAG)
        for param in method.parameters:
            if not param.has_annotation(self.convention.request_body_annotation):
                continue

            text = tags[0].text if tags else None
            if text is None:
                text = find_param_text(method.param_tags, param.name)

            return RequestBody(name=param.name, description=text or "", type=TypeRef(qualified_name=param.type))
        return None


def _first_value(elements: dict[str, list[str]], key: str) -> str | None:
    values = elements.get(key) or []
    return values[0] if values else None
