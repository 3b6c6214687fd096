"""Framework conventions.

A Convention names the annotations that play each role for a web
framework. Supporting another framework means adding another
Convention value.
"""

from pydantic import BaseModel, ConfigDict

from rest_docgen.model import erase_type

JAVA_PRIMITIVES = ("boolean", "byte", "char", "short", "int", "long", "float", "double", "void")


class Convention(BaseModel):
    model_config = ConfigDict(frozen=True)

    controller_annotations: tuple[str, ...]
    mapping_annotation: str
    response_body_annotation: str
    path_variable_annotation: str
    query_param_annotation: str
    request_body_annotation: str
    default_http_method: str = "GET"

    # Types the bean shape synthesizer never descends into.
    primitive_types: tuple[str, ...] = JAVA_PRIMITIVES
    leaf_prefixes: tuple[str, ...] = ("java.lang.", "java.util.")

    def is_primitive_like(self, qualified_name: str) -> bool:
        """True for primitives and types under the well-known namespaces.

        Arrays and parameterized types are judged by their element or raw type.
        """
        name = erase_type(qualified_name)
        return name in self.primitive_types or name.startswith(self.leaf_prefixes)


_SPRING_WEB = "org.springframework.web.bind.annotation."

SPRING = Convention(
    controller_annotations=(
        "org.springframework.stereotype.Controller",
        _SPRING_WEB + "RestController",
    ),
    mapping_annotation=_SPRING_WEB + "RequestMapping",
    response_body_annotation=_SPRING_WEB + "ResponseBody",
    path_variable_annotation=_SPRING_WEB + "PathVariable",
    query_param_annotation=_SPRING_WEB + "RequestParam",
    request_body_annotation=_SPRING_WEB + "RequestBody",
)
