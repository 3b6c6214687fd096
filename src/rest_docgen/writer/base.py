"""Writer interface and render configuration."""

from pathlib import Path
from typing import Protocol

from pydantic import BaseModel

from rest_docgen.model import ClassDescriptor

DEFAULT_TITLE = "REST Documentation"
DEFAULT_STYLESHEET = "stylesheet.css"


class Configuration(BaseModel):
    """Options that control document output."""

    document_title: str = DEFAULT_TITLE
    stylesheet: str = DEFAULT_STYLESHEET
    default_stylesheet: bool = True  # copy the bundled stylesheet to `stylesheet`
    output_dir: Path = Path(".")
    output_file: str = "index.html"

    @classmethod
    def from_options(
        cls,
        title: str | None = None,
        stylesheet: str | None = None,
        output_dir: Path | None = None,
    ) -> "Configuration":
        """Build a configuration from command line options.

        The bundled stylesheet is only generated when the user did not
        point at a stylesheet of their own.
        """
        return cls(
            document_title=title or DEFAULT_TITLE,
            stylesheet=stylesheet or DEFAULT_STYLESHEET,
            default_stylesheet=stylesheet is None,
            output_dir=output_dir or Path("."),
        )

    @property
    def output_path(self) -> Path:
        return self.output_dir / self.output_file

    @property
    def stylesheet_path(self) -> Path:
        return self.output_dir / self.stylesheet


class Writer(Protocol):
    def write(self, class_descriptors: list[ClassDescriptor], config: Configuration) -> None:
        """Render the descriptors; raises RenderError on I/O failure."""
        ...
