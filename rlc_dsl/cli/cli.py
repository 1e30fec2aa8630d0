from pathlib import Path
import click

from datetime import date
from rich import pretty
from rich.console import Console
from textx.export import metamodel_export

from rlc_dsl.language import RlcMetaModel, build_model, parse_model
from rlc_dsl.log import MAX_VERBOSITY, SEPARATOR, SHOW_IMPORTED, SHOW_MODEL, SILENT, configure_logging
from rlc_dsl.utils import print_model_debug

pretty.install()
console = Console()


def _stamp() -> str:
    return f"[{date.today().strftime('%Y-%m-%d')}]"


@click.group()
@click.option(
    "--verbose",
    "-v",
    "verbosity",
    type=click.IntRange(SILENT, MAX_VERBOSITY, clamp=True),
    default=1,
    envvar="RLC_VERBOSE",
    show_default=True,
    help="0 silent, 1 log stages, 2 also print the model, 3 also print the imported model.",
)
@click.pass_context
def cli(context, verbosity):
    context.ensure_object(dict)
    try:
        configure_logging(verbosity)
    except ValueError as e:
        raise click.UsageError(str(e))
    context.obj["verbosity"] = verbosity


def _dump(context, model):
    verbosity = context.obj.get("verbosity", 1)
    if verbosity >= SHOW_IMPORTED:
        click.echo(SEPARATOR)
        click.echo(model.imported_model.to_lang())
    if verbosity >= SHOW_MODEL:
        click.echo(SEPARATOR)
        click.echo(model.to_lang(), nl=False)


@cli.command("validate", help="Check duplicates and resolve a model.")
@click.pass_context
@click.argument("model_path")
def validate(context, model_path):
    try:
        model = build_model(model_path)
        console.print(f"{_stamp()} Model validation success!", style="green")
        _dump(context, model)
    except Exception as e:
        console.print(f"{_stamp()} Validation failed with error(s): {e}", style="red")
        context.exit(1)
    else:
        context.exit(0)


@cli.command("inspect", help="Build a model and print a summary (robots, types, functions, calls).")
@click.pass_context
@click.argument("model_path")
def inspect_cmd(context, model_path):
    try:
        model = build_model(model_path)
        console.print(f"{_stamp()} Model validation success!", style="green")
        print_model_debug(model)
    except Exception as e:
        console.print(f"{_stamp()} Inspect failed with error(s): {e}", style="red")
        context.exit(1)
    else:
        context.exit(0)


@cli.command("render", help="Print the model back as robot-language source.")
@click.pass_context
@click.argument("model_path")
@click.option("--skillsets", is_flag=True, help="Also print the imported skillset model.")
@click.option("--no-resolve", is_flag=True, help="Print the model as parsed, before checks and resolution.")
def render_cmd(context, model_path, skillsets, no_resolve):
    try:
        if no_resolve:
            model = parse_model(model_path)
        else:
            model = build_model(model_path)

        if skillsets:
            click.echo(model.imported_model.to_lang())
            click.echo(SEPARATOR)
        click.echo(model.to_lang(), nl=False)
    except Exception as e:
        console.print(f"{_stamp()} Render failed with error(s): {e}", style="red")
        context.exit(1)
    else:
        context.exit(0)


@cli.command("visualize", help="Export the robot-language metamodel as a GraphViz .dot file.")
@click.pass_context
@click.option("--out", "out_dir", default="docs", help="Output directory (default: ./docs)")
def visualize_cmd(context, out_dir):
    try:
        out_path = Path(out_dir).resolve()
        out_path.mkdir(parents=True, exist_ok=True)
        dot_file = out_path / "rlc_metamodel.dot"

        metamodel_export(RlcMetaModel, str(dot_file))

        console.print(f"{_stamp()} Metamodel written to: {dot_file}", style="green")
    except Exception as e:
        console.print(f"{_stamp()} Visualization failed with: {e}", style="red")
        context.exit(1)
    else:
        context.exit(0)


def main():
    cli(obj={})


if __name__ == "__main__":
    main()
