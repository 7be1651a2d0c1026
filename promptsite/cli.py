"""Command-line interface.

Usage::

    promptsite "Create a SaaS landing page for ProbFixora with pricing" -o ./out --zip
    promptsite "A bakery website" --ai openai --enhance
"""

from __future__ import annotations

import argparse
import asyncio
import sys
import time
from pathlib import Path

from promptsite.config import Config
from promptsite.copywriter import Copywriter
from promptsite.exporter import (
    ExportError,
    calculate_project_size,
    export_to_zip,
    file_tree_preview,
    generate_json_output,
    write_file_tree,
)
from promptsite.llm_client import HtmlCache, create_html_client
from promptsite.parser import Intent
from promptsite.preview import generate_preview_html
from promptsite.scaffolder import GeneratedOutput, GenerationError, generate_website
from promptsite.utils import (
    console,
    create_progress,
    format_bytes,
    format_duration,
    print_error,
    print_header,
    print_success,
    print_summary_table,
    print_warning,
    slugify,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="promptsite",
        description="promptsite -- turn a one-line prompt into a React + Tailwind website",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            '  promptsite "Landing page for Acme with pricing and contact"\n'
            '  promptsite "Portfolio for a design agency" -o ./sites --zip --preview\n'
            '  promptsite "A bakery website" --ai gemini --enhance\n'
        ),
    )
    parser.add_argument("prompt", help="Natural-language description of the website")
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Output directory (default: ./output or PROMPTSITE_OUTPUT_DIR)",
    )
    parser.add_argument("--zip", action="store_true", help="Also write <site>.zip")
    parser.add_argument(
        "--preview", action="store_true", help="Also write a standalone <site>-preview.html"
    )
    parser.add_argument(
        "--json", action="store_true", help="Also write the file tree as <site>.json"
    )
    parser.add_argument(
        "--no-delay", action="store_true", help="Skip the pauses between generation phases"
    )
    parser.add_argument(
        "--ai",
        choices=["openai", "gemini"],
        default=None,
        help="Generate a single HTML page with a hosted model instead of a project",
    )
    parser.add_argument(
        "--enhance",
        action="store_true",
        help="With --ai: rewrite the prompt into a richer brief first",
    )
    return parser


# ---------------------------------------------------------------------------
# Project path
# ---------------------------------------------------------------------------


async def _generate_project(config: Config, prompt: str) -> GeneratedOutput:
    with create_progress() as progress:
        task = progress.add_task("Starting...", total=100)

        def on_progress(percentage: int, label: str) -> None:
            progress.update(task, completed=percentage, description=label)

        return await generate_website(prompt, on_progress=on_progress, config=config)


async def run_project(config: Config, args: argparse.Namespace) -> None:
    """Generate the project and write every requested artefact.

    Raises:
        GenerationError: If generation fails.
        ExportError: If an output file cannot be written.
    """
    started = time.monotonic()
    print_header("promptsite")
    result = await _generate_project(config, args.prompt)
    intent = result.parsed_intent
    slug = slugify(result.site_name)

    project_dir = config.output_dir / slug
    await write_file_tree(result.file_tree, project_dir)

    extras: dict[str, str] = {}
    env_vars = config.api_keys.vite_env()
    if env_vars:
        extras["Env file"] = str(_write_text(project_dir / ".env.local", _env_file(env_vars)))
    if args.zip:
        extras["Archive"] = str(export_to_zip(result.file_tree, result.site_name, config.output_dir))
    if args.preview:
        extras["Preview"] = str(
            _write_text(config.output_dir / f"{slug}-preview.html", generate_preview_html(intent))
        )
    if args.json:
        extras["JSON"] = str(
            _write_text(
                config.output_dir / f"{slug}.json",
                generate_json_output(result.file_tree, result.site_name),
            )
        )

    copy = await _marketing_copy(config, intent)

    console.print()
    console.print(file_tree_preview(result.file_tree))
    console.print()
    print_summary_table(
        {
            "Site": result.site_name,
            **copy,
            "Template": result.template_used,
            "Tone / Theme": f"{intent.tone.value} / {intent.theme.value}",
            "Sections": ", ".join(section.value for section in intent.sections),
            "Files": str(len(result.file_tree)),
            "Size": format_bytes(calculate_project_size(result.file_tree)),
            "Project": str(project_dir),
            "Services": ", ".join(config.api_keys.enabled()) or "none",
            **extras,
            "Elapsed": format_duration(time.monotonic() - started),
        },
        title="Generated project",
    )
    if result.notes:
        console.print(f"[dim]{result.notes}[/dim]")
    console.print(f"[cyan]Next:[/cyan] cd {project_dir} && {result.commands.dev}")
    print_success(f"Generated {result.site_name}")


async def _marketing_copy(config: Config, intent: Intent) -> dict[str, str]:
    """Summary rows written by the copywriter (offline tables without a key)."""
    copywriter = Copywriter(config.api_keys.get("huggingface"), config.llm)
    industry = intent.industry or "general"
    tone = intent.tone.value

    tagline = await copywriter.generate_tagline(intent.site_name, industry, tone)
    primary = await copywriter.generate_cta_text(intent.site_name, tone, is_primary=True)
    secondary = await copywriter.generate_cta_text(intent.site_name, tone, is_primary=False)
    rows = {"Tagline": tagline, "Buttons": f"{primary} / {secondary}"}

    if intent.features:
        lead = intent.features[0]
        description = await copywriter.generate_feature_description(
            lead.title, intent.site_name, industry
        )
        rows["Lead feature"] = f"{lead.title}: {description}"
    return rows


def _env_file(variables: dict[str, str]) -> str:
    return "".join(f"{name}={value}\n" for name, value in variables.items())


def _write_text(path: Path, content: str) -> Path:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise ExportError(f"Could not write {path}: {exc}") from exc
    return path


# ---------------------------------------------------------------------------
# LLM path
# ---------------------------------------------------------------------------


async def run_ai(config: Config, args: argparse.Namespace) -> bool:
    """Generate a single HTML page with the chosen provider.

    Returns:
        ``True`` on success. Provider failures are printed, not raised.

    Raises:
        ExportError: If the HTML file or the cache cannot be written.
    """
    client = create_html_client(config, args.ai)
    if client is None or not client.is_available:
        print_error(
            f"{args.ai} API key not configured. Set {args.ai.upper()}_API_KEY in your environment."
        )
        return False

    prompt = args.prompt
    if args.enhance:
        with console.status("Enhancing prompt..."):
            enhanced = await client.enhance_prompt(prompt)
        if enhanced.success:
            prompt = enhanced.enhanced_prompt
            console.print(f"[dim]Enhanced prompt:[/dim] {prompt}")
        else:
            print_warning(f"Prompt enhancement failed: {enhanced.error}")

    received = 0

    def on_token(token: str) -> None:
        nonlocal received
        received += len(token)

    with console.status(f"Generating with {client.model}..."):
        result = await client.generate(prompt, on_token=on_token)

    if not result.success:
        print_error(result.error or "Generation failed")
        return False

    target = _write_text(config.output_dir / "index.html", result.html)
    _cache_html(config, result.html, prompt)
    print_summary_table(
        {
            "Model": result.model,
            "Characters": str(received),
            "Tokens": str(result.tokens_used) if result.tokens_used is not None else "n/a",
            "Output": str(target),
        },
        title="Generated page",
    )
    print_success("HTML page generated")
    return True


def _cache_html(config: Config, html: str, prompt: str) -> Path:
    try:
        return HtmlCache(config.cache_path).set(html, prompt)
    except OSError as exc:
        raise ExportError(f"Could not update cache {config.cache_path}: {exc}") from exc


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``promptsite`` and ``python -m promptsite``."""
    args = build_parser().parse_args(argv)

    if not args.prompt.strip():
        console.print("[bold red]Error:[/bold red] Prompt must not be empty")
        sys.exit(1)
    if args.enhance and not args.ai:
        print_warning("--enhance only applies together with --ai; ignoring it")

    config = Config.from_env()
    if args.output:
        config.output_dir = Path(args.output)
    if args.no_delay:
        config.generation.delay_scale = 0.0

    try:
        if args.ai:
            ok = asyncio.run(run_ai(config, args))
        else:
            asyncio.run(run_project(config, args))
            ok = True
    except (GenerationError, ExportError) as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        sys.exit(1)

    if not ok:
        sys.exit(1)


if __name__ == "__main__":
    main()
