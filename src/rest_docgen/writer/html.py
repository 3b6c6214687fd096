"""Single page XHTML writer."""

import logging
import shutil
from pathlib import Path

from rest_docgen.collector.convention import SPRING, Convention
from rest_docgen.exceptions import RenderError
from rest_docgen.model import ClassDescriptor, Endpoint, TypeRef
from rest_docgen.parser.base import DeclarationSet
from rest_docgen.writer.base import Configuration
from rest_docgen.writer.shape import BeanShapeSynthesizer

logger = logging.getLogger(__name__)

ASSETS_DIR = Path(__file__).parent / "assets"
DEFAULT_STYLESHEET_ASSET = "default-stylesheet.css"


class SimpleHtmlWriter:
    """Writes every class and endpoint into one ``index.html``."""

    def __init__(self, types: DeclarationSet | None = None, convention: Convention = SPRING):
        self.shapes = BeanShapeSynthesizer(types, convention)

    def write(self, class_descriptors: list[ClassDescriptor], config: Configuration) -> None:
        if config.default_stylesheet:
            self._generate_stylesheet(config)

        html = self.render(class_descriptors, config)
        try:
            with config.output_path.open("w", encoding="utf-8", newline="\n") as out:
                out.write(html)
        except OSError as e:
            raise RenderError(f"Cannot write {config.output_path}: {e}") from e
        logger.info("Wrote %s", config.output_path)

    def render(self, class_descriptors: list[ClassDescriptor], config: Configuration) -> str:
        """Return the full document as a string."""
        title = config.document_title
        lines = [
            '<?xml version="1.0" encoding="utf-8" standalone="no" ?>',
            '<!DOCTYPE html PUBLIC "-//W3C//DTD XHTML 1.0 Strict//EN"',
            '    "http://www.w3.org/TR/xhtml1/DTD/xhtml1-strict.dtd">',
            '<html xmlns="http://www.w3.org/1999/xhtml">',
            "<head>",
            '<meta http-equiv="Content-Type" content="text/html; charset=utf-8" />',
            f"<title>{title}</title>",
            f"<link rel='stylesheet' type='text/css' href='{config.stylesheet}'/>",
            "</head>",
            "<body>",
            '<div id="wrapper">',
            '<div id="container">',
            f"<h1>{title}</h1>",
            "<hr />",
        ]

        for descriptor in class_descriptors:
            lines.append(f"<div id='{descriptor.name.replace(' ', '_')}'>")
            lines.append(f"<h3>{descriptor.name}</h3>")
            lines.append(f'<div class="bean_description">{descriptor.description}</div>')
            for endpoint in descriptor.endpoints:
                lines.extend(self._render_endpoint(endpoint))
            lines.append("</div>")
            lines.append("<hr />")

        lines.extend(["</div>", "</div>", "</body>", "</html>"])
        return "\n".join(lines) + "\n"

    def _render_endpoint(self, endpoint: Endpoint) -> list[str]:
        lines = [
            '<table class="endpoint">',
            "<colgroup>",
            '<col style="width: 10%;" />',
            '<col style="width: 90%;" />',
            "</colgroup>",
            "<tr>",
            "<th>Method</th>",
            "<th>Path</th>",
            "</tr>",
            "<tr>",
            f'<td class="field_format">{endpoint.http_method}</td>',
            f'<td class="field_format">{endpoint.path}</td>',
            "</tr>",
            "<tr>",
            '<th colspan="2">REST Point Information</th>',
            "</tr>",
            "<tr>",
            '<td colspan="2">',
        ]

        if endpoint.path_vars:
            lines.extend(_list_open("Path Variables"))
            for path_var in endpoint.path_vars:
                lines.append("<tr>")
                lines.append(f'<td class="code_format">{path_var.name}</td>')
                lines.append(f'<td class="descr_format">{path_var.description}</td>')
                lines.append("</tr>")
            lines.append("</table>")

        if endpoint.query_params:
            lines.extend(_list_open("Query Parameters"))
            for query_param in endpoint.query_params:
                suffix = " (required)" if query_param.required else ""
                lines.append("<tr>")
                lines.append(f'<td class="code_format">{query_param.name}{suffix}</td>')
                lines.append(self._type_cell(query_param.type))
                lines.append(f'<td class="descr_format">{query_param.description}</td>')
                lines.append("</tr>")
            lines.append("</table>")

        if endpoint.request_body is not None:
            body = endpoint.request_body
            lines.extend(_list_open("Request Body"))
            lines.append("<tr>")
            lines.append(f'<td class="code_format">{body.name}</td>')
            lines.append(self._type_cell(body.type))
            lines.append(f'<td class="descr_format">{body.description}</td>')
            lines.append("</tr>")
            lines.append("</table>")

        for title, media_types in (("Consumes", endpoint.consumes), ("Produces", endpoint.produces)):
            if not media_types:
                continue
            lines.extend(_list_open(title))
            for media_type in media_types:
                lines.append("<tr>")
                lines.append(f'<td class="code_format">{media_type}</td>')
                lines.append("</tr>")
            lines.append("</table>")

        lines.extend(
            [
                '<div class="info_title">Description</div>',
                f'<div class="info_text">{endpoint.description}</div>',
                "</td>",
                "</tr>",
                "</table>",
            ]
        )
        return lines

    def _type_cell(self, type_ref: TypeRef) -> str:
        if self.shapes.is_leaf(type_ref.qualified_name):
            return f"<td>{type_ref.simple_name}</td>"
        return f"<td><pre>{self.shapes.render(type_ref.qualified_name)}</pre></td>"

    def _generate_stylesheet(self, config: Configuration) -> None:
        source = ASSETS_DIR / DEFAULT_STYLESHEET_ASSET
        try:
            with source.open("rb") as src, config.stylesheet_path.open("wb") as dst:
                shutil.copyfileobj(src, dst)
        except OSError as e:
            raise RenderError(f"Cannot copy default stylesheet to {config.stylesheet_path}: {e}") from e
        logger.debug("Copied default stylesheet to %s", config.stylesheet_path)


def _list_open(title: str) -> list[str]:
    return [f'<div class="info_title">{title}</div>', '<table width="100%" class="list">']
