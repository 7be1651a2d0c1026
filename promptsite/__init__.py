"""promptsite -- turn a one-line website description into a runnable project.

The package is split into two cooperating halves:

* :mod:`promptsite.parser` extracts a structured :class:`~promptsite.parser.models.Intent`
  from free text using keyword tables and regular expressions.
* :mod:`promptsite.scaffolder` expands that intent into a flat file tree for a
  Vite + React + Tailwind project.

Quick usage::

    import asyncio
    from promptsite import generate_website

    output = asyncio.run(generate_website("Landing page for 'Acme' with pricing"))
    print(sorted(output.file_tree))
"""

from promptsite.parser import Intent, parse_prompt
from promptsite.scaffolder import GenerationError, GeneratedOutput, generate_website

__version__ = "0.1.0"

__all__ = [
    "Intent",
    "parse_prompt",
    "generate_website",
    "GeneratedOutput",
    "GenerationError",
    "__version__",
]
