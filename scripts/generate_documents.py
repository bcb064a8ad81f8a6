#!/usr/bin/env python3
"""
Generate Campaign Documents

Builds the four campaign documents (guidelines, notification, intake form,
enclosed letter) from a YAML campaign record.

Examples:
    # List template families
    python scripts/generate_documents.py families

    # Print all four documents for the default family
    python scripts/generate_documents.py generate campaign.yaml

    # Instagram family, email enquiries, write files
    python scripts/generate_documents.py generate campaign.yaml --family "IG/事後抽選" --email -o outs/documents/summer
"""

import os
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

import typer
from dotenv import load_dotenv
from jinja2 import TemplateNotFound
from omegaconf import OmegaConf
from typing_extensions import Annotated

from herald.contexts.templating import (
    ContactMethod,
    TemplateCatalog,
    TemplateCatalogError,
    generate_campaign_documents,
    merge_with_defaults,
)
from herald.contexts.templating.logger import setup_templating_logger

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))


def load_record(record_path: Path) -> Dict[str, Any]:
    """Load a flat campaign record from YAML; nested values are rejected."""
    data = OmegaConf.to_container(OmegaConf.load(record_path), resolve=True) or {}
    nested = [key for key, value in data.items() if isinstance(value, (dict, list))]
    if nested:
        raise ValueError(f"Campaign record must be flat, nested keys: {', '.join(nested)}")
    return data


app = typer.Typer(
    help="Generate campaign guidelines, notification, form and letter",
    add_completion=False,
)


@app.command("families")
def families_command():
    """
    List template families in the catalog.

    Examples:\n
        $ generate_documents.py families
    """
    try:
        catalog = TemplateCatalog()
    except TemplateCatalogError as e:
        typer.secho(str(e), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    for family in catalog.families():
        marker = " (default)" if family == catalog.default_family else ""
        typer.echo(f"{family.key}  platform={family.platform.value} mode={family.mode.value}{marker}")


@app.command("generate")
def generate_command(
    record_path: Annotated[
        Path,
        typer.Argument(help="YAML file with the campaign record", exists=True, dir_okay=False),
    ],
    family: Annotated[
        Optional[str],
        typer.Option("--family", "-f", help="Template family key (e.g. 'X/事後抽選')"),
    ] = None,
    email: Annotated[
        bool,
        typer.Option("--email", help="Take enquiries by email instead of DM"),
    ] = False,
    output_dir: Annotated[
        Optional[Path],
        typer.Option("--output-dir", "-o", help="Write <kind>.txt files here instead of printing"),
    ] = None,
    defaults: Annotated[
        bool,
        typer.Option("--defaults/--no-defaults", help="Fill missing fields with form defaults"),
    ] = True,
):
    """
    Generate all four documents for a campaign record.

    Examples:\n
        $ generate_documents.py generate campaign.yaml

        $ generate_documents.py generate campaign.yaml -f "TikTok/事後抽選" -o outs/documents/tiktok
    """
    log_dir = LOGS_PATH / f"generate_{datetime.now().strftime('%Y%m%d_%H%M%S')}"
    setup_templating_logger(log_dir, family=family or "")

    try:
        record = load_record(record_path)
    except ValueError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    if defaults:
        record = merge_with_defaults(record)
    else:
        record = {str(key): "" if value is None else str(value) for key, value in record.items()}

    contact_method = ContactMethod.EMAIL if email else ContactMethod.DIRECT_MESSAGE

    try:
        documents = generate_campaign_documents(record, family, contact_method)
    except (TemplateCatalogError, TemplateNotFound) as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    if output_dir is None:
        for kind, text in documents.as_dict().items():
            typer.secho(f"===== {kind} =====", bold=True)
            typer.echo(text)
            typer.echo()
        return

    output_dir.mkdir(parents=True, exist_ok=True)
    for kind, text in documents.as_dict().items():
        output_path = output_dir / f"{kind}.txt"
        output_path.write_text(text + "\n", encoding="utf-8")
        typer.echo(f"✓ {kind} saved to {output_path}")


if __name__ == "__main__":
    app()
