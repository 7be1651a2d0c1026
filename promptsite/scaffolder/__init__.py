"""Project scaffolding: expands an ``Intent`` into a file tree."""

from .component_gen import ComponentGenerator
from .config_gen import ConfigFileGenerator
from .docs_gen import DocsGenerator
from .generator import (
    Commands,
    FileTree,
    GeneratedOutput,
    GenerationError,
    ProjectGenerator,
    detect_template,
    generate_website,
    generation_notes,
)
from .library import TEMPLATES, build_context, get_template, register
from .templates import TemplateRenderer
from .utility_gen import UtilityGenerator

__all__ = [
    "TEMPLATES",
    "Commands",
    "ComponentGenerator",
    "ConfigFileGenerator",
    "DocsGenerator",
    "FileTree",
    "GeneratedOutput",
    "GenerationError",
    "ProjectGenerator",
    "TemplateRenderer",
    "UtilityGenerator",
    "build_context",
    "detect_template",
    "generate_website",
    "generation_notes",
    "get_template",
    "register",
]
