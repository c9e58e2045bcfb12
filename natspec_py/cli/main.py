"""
natspec-py — generate ABI, interface text and NatSpec docs from a contract descriptor.

Commands:
  natspec-py generate DESCRIPTOR --type abi|interface|userdoc|devdoc [--out PATH]
  natspec-py combined DESCRIPTOR --out-dir DIR [--type ...]
  natspec-py parse-comment TEXT [--owner function|contract]

DESCRIPTOR is a JSON contract description (see natspec_py.loader); use '-'
to read it from stdin.

Global options:
  --verbose / -v    Debug logging on stderr
  --no-schema       Skip JSON-Schema validation of descriptors

Exit codes: 0 success; 1 documentation/generation error; 2 unusable descriptor.

Examples:
  natspec-py generate build/Token.json --type abi
  natspec-py combined build/Token.json --out-dir out/
  natspec-py parse-comment "@notice Hello" --owner function
"""

from __future__ import annotations

import dataclasses
import json
import logging
import sys
from pathlib import Path
from typing import List, NoReturn, Optional

import typer

from natspec_py.config import DocgenConfig, load_config
from natspec_py.errors import DescriptorError, NatspecError
from natspec_py.handler import DocumentationType, InterfaceHandler
from natspec_py.loader import load_descriptor, loads_descriptor
from natspec_py.model import ContractDescription
from natspec_py.natspec import CommentOwner, parse_comment
from natspec_py.version import __version__

log = logging.getLogger("natspec_py.cli")

app = typer.Typer(
    name="natspec-py",
    help="ABI, interface and NatSpec documentation generator",
    no_args_is_help=True,
    add_completion=False,
)


class GlobalContext:
    def __init__(self) -> None:
        self.verbose: bool = False
        self.skip_schema: bool = False

    def config(self) -> DocgenConfig:
        cfg = load_config()
        if self.skip_schema:
            cfg = dataclasses.replace(cfg, strict_schema=False)
        return cfg


_ctx = GlobalContext()


def _setup_logging(verbose: bool, cfg: DocgenConfig) -> None:
    level = logging.DEBUG if verbose else getattr(logging, cfg.log_level, logging.WARNING)
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="[%(levelname)s] %(name)s: %(message)s",
        force=True,
    )


def _fail(err: NatspecError) -> NoReturn:
    typer.echo(f"error[{err.to_dict()['code']}]: {err.msg}", err=True)
    log.debug("failure context: %s", err.ctx)
    raise typer.Exit(2 if isinstance(err, DescriptorError) else 1)


def _load(descriptor: str, cfg: DocgenConfig) -> ContractDescription:
    if descriptor == "-":
        return loads_descriptor(sys.stdin.read(), config=cfg)
    return load_descriptor(Path(descriptor), config=cfg)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    no_schema: bool = typer.Option(
        False, "--no-schema", help="Skip JSON-Schema validation of descriptors"
    ),
) -> None:
    """
    Generate interface and documentation artifacts for a resolved contract.

    Configuration is resolved in this order (highest to lowest priority):
      1. Command-line flags
      2. Environment variables (NATSPEC_DOC_INDENT, NATSPEC_LOG_LEVEL, ...)
      3. Built-in defaults
    """
    _ctx.verbose = verbose
    _ctx.skip_schema = no_schema
    _setup_logging(verbose, _ctx.config())


@app.command()
def generate(
    descriptor: str = typer.Argument(..., help="Contract descriptor JSON file, or '-' for stdin"),
    doc_type: DocumentationType = typer.Option(
        DocumentationType.ABI_INTERFACE, "--type", "-t", help="Output to generate"
    ),
    out: Optional[Path] = typer.Option(None, "--out", "-o", help="Write to this file instead of stdout"),
) -> None:
    """Generate a single output."""
    cfg = _ctx.config()
    try:
        contract = _load(descriptor, cfg)
        text = InterfaceHandler(cfg).documentation(contract, doc_type)
    except NatspecError as e:
        _fail(e)

    if out is None:
        typer.echo(text, nl=False)
        return
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(text, encoding="utf-8")
    log.info("wrote %s → %s", doc_type.value, out)


@app.command()
def combined(
    descriptor: str = typer.Argument(..., help="Contract descriptor JSON file, or '-' for stdin"),
    out_dir: Path = typer.Option(..., "--out-dir", "-d", help="Directory for <Name>.<ext> files"),
    doc_types: Optional[List[DocumentationType]] = typer.Option(
        None, "--type", "-t", help="Outputs to generate (repeatable; default: all)"
    ),
) -> None:
    """Generate several outputs at once, one file per output type."""
    cfg = _ctx.config()
    kinds = doc_types or list(DocumentationType)
    try:
        contract = _load(descriptor, cfg)
        handler = InterfaceHandler(cfg)
        # render everything before writing anything
        rendered = [(kind, handler.documentation(contract, kind)) for kind in kinds]
    except NatspecError as e:
        _fail(e)

    out_dir.mkdir(parents=True, exist_ok=True)
    for kind, text in rendered:
        target = out_dir / f"{contract.name}{kind.file_suffix}"
        target.write_text(text, encoding="utf-8")
        typer.echo(str(target))
        log.info("wrote %s → %s", kind.value, target)


@app.command("parse-comment")
def parse_comment_cmd(
    text: str = typer.Argument(..., help="Comment text ('\\n' escapes are expanded)"),
    owner: CommentOwner = typer.Option(CommentOwner.FUNCTION, "--owner", help="Declaration owning the comment"),
) -> None:
    """Parse one NatSpec comment and print its fields as JSON."""
    try:
        doc = parse_comment(text.replace("\\n", "\n"), owner)
    except NatspecError as e:
        _fail(e)
    typer.echo(json.dumps(doc.to_dict(), indent=2, ensure_ascii=False))


@app.command()
def version() -> None:
    """Print the natspec-py version."""
    typer.echo(__version__)


def main() -> None:
    """Entry point for the natspec-py CLI."""
    app()


if __name__ == "__main__":
    main()
