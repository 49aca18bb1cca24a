#!/usr/bin/env python3
"""
Template render script

Usage:
  python scripts/render_template.py <template-id-or-file> [--context <file>] [--var key=value ...]
                                    [--templates-dir <dir>] [--out <name>] [--log-level <level>]

Examples:
  python scripts/render_template.py templates/user-card.html --var name=Alice
  python scripts/render_template.py user-card --context vars.yaml --out user-card.html
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from application.services.template_mounter import TemplateMounter
from application.services.template_renderer import TemplateRenderer
from domain.exceptions import ExpressionError, TemplateMountError
from domain.template import TemplateDocument
from infrastructure.config.settings import Settings
from infrastructure.context.base_loader import ContextLoadError
from infrastructure.context.loader_registry import ContextLoaderRegistry
from infrastructure.logging.console_logger import ConsoleLogger
from infrastructure.logging.log_setup import setup_console_logging
from infrastructure.output.file_render_target import FileTargetResolver
from infrastructure.output.in_memory_render_target import InMemoryRenderTarget
from infrastructure.templates.file_template_source import FileTemplateSource


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render an HTMLx template")
    parser.add_argument("template", help="Template file path or template id")
    parser.add_argument("--context", help="Context file (.json / .yaml / .yml)")
    parser.add_argument(
        "--var",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Context value (string); overrides --context",
    )
    parser.add_argument("--templates-dir", help="Directory searched for template ids")
    parser.add_argument("--out", help="Output name under the output directory (default: stdout)")
    parser.add_argument("--log-level", help="Log level (default: HTMLX_LOG_LEVEL or INFO)")
    return parser.parse_args(argv)


def _build_context(args: argparse.Namespace) -> Dict[str, Any]:
    context: Dict[str, Any] = {}
    if args.context:
        path = Path(args.context)
        loader = ContextLoaderRegistry().get_loader(path)
        context.update(loader.load_from_file(path))

    for item in args.var:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise ContextLoadError(f"Invalid --var (expected KEY=VALUE): {item}")
        context[key] = value
    return context


def _template_ref(template: str) -> Any:
    path = Path(template)
    if path.is_file():
        return TemplateDocument(id=path.stem, content=path.read_text(encoding="utf-8"))
    return template


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    settings = Settings.from_env()
    setup_console_logging(level=args.log_level or settings.log_level, stderr=True)

    template_dir = Path(args.templates_dir) if args.templates_dir else settings.template_dir
    logger = ConsoleLogger().bind(template=args.template)
    mounter = TemplateMounter(
        renderer=TemplateRenderer(logger=logger),
        templates=FileTemplateSource(template_dir),
        targets=FileTargetResolver(settings.output_dir),
        logger=logger,
    )

    try:
        context = _build_context(args)
        if args.out:
            mounter.mount(_template_ref(args.template), args.out, context)
        else:
            target = InMemoryRenderTarget()
            mounter.mount(_template_ref(args.template), target, context)
            print(target.html)
    except (ContextLoadError, ExpressionError, TemplateMountError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
