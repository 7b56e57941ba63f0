from __future__ import annotations

from pathlib import Path

import typer

app = typer.Typer(name="casetree", help="Build and inspect test trees")
schema_app = typer.Typer(name="schema", help="Generate schema tooling")
app.add_typer(schema_app, name="schema")


@app.command()
def explore(
    config: str = typer.Argument(help="Path to test tree YAML declaration"),
    recursive: bool = typer.Option(
        True, "--recursive/--no-recursive", help="Include descendant tests"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output to terminal"
    ),
    debug_log: str | None = typer.Option(None, help="Also write debug output to this file"),
):
    """Print the XML representation of a declared test tree."""
    import yaml

    from casetree.config import build_tree, load_config
    from casetree.verbose import setup_logger

    config_path = Path(config)
    if not config_path.exists():
        typer.echo(f"Error: config file not found: {config}", err=True)
        raise typer.Exit(1)

    logger = setup_logger(
        debug_file=Path(debug_log) if debug_log else None, verbose=verbose
    )
    logger.debug("Loading test tree from %s", config_path)

    try:
        tree = build_tree(load_config(config_path))
    except (ValueError, yaml.YAMLError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(tree.to_xml(recursive).outer_xml)


@schema_app.command("generate")
def schema_generate(
    out: str = typer.Option(
        "schemas/casetree.schema.json", help="Where to write the JSON Schema"
    ),
    doc: str = typer.Option("docs/schema.md", help="Where to write the markdown doc"),
):
    """Write the JSON Schema and markdown doc for the YAML declaration format."""
    from casetree.schema import write_json_schema, write_schema_doc

    out_path = Path(out)
    doc_path = Path(doc)
    write_json_schema(out_path)
    write_schema_doc(doc_path)
    typer.echo(f"Wrote schema: {out_path}")
    typer.echo(f"Wrote doc: {doc_path}")