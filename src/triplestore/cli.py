"""
Command-line interface for the triple store.

Loads triples from a tab-separated file into a fresh in-memory store, then
dumps, queries or removes from it. Nothing is written back to disk.
"""

from typing import IO, Iterator, Tuple

import click

from triplestore.engine import TripleStore
from triplestore.utils.config import StoreConfig, load_config
from triplestore.utils.logger import get_logger, set_global_log_level

logger = get_logger("CLI")


def read_triples(handle: IO[str]) -> Iterator[Tuple[str, str, str]]:
    """
    Parse one triple per line from a TSV stream.

    Blank lines and lines starting with '#' are skipped.

    Raises:
        click.BadParameter: If a line does not hold exactly three fields
    """
    for line_no, line in enumerate(handle, 1):
        line = line.rstrip("\r\n")
        if not line.strip() or line.startswith("#"):
            continue
        fields = line.split("\t")
        if len(fields) != 3:
            raise click.BadParameter(
                f"line {line_no}: expected 3 tab-separated fields, got {len(fields)}",
                param_hint="FILE",
            )
        yield fields[0], fields[1], fields[2]


def build_store(config: StoreConfig, handle: IO[str]) -> TripleStore:
    """Create a store from config and fill it from a TSV stream."""
    store = TripleStore.from_config(config)
    added = sum(store.insert(*triple) for triple in read_triples(handle))
    logger.info(f"Loaded {added} fact(s) from {getattr(handle, 'name', '<stream>')}")
    return store


@click.group()
@click.option(
    "--config",
    "config_path",
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help="Path to a TOML configuration file",
)
@click.option(
    "--wildcard",
    default=None,
    help="Override the wildcard string used by query and remove",
)
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    help="Override the logging level",
)
@click.pass_context
def main(ctx: click.Context, config_path: str | None, wildcard: str | None, log_level: str | None):
    """
    Load triples from a TSV file and inspect them.

    Example usage:
        triplestore dump facts.tsv
        triplestore query facts.tsv alice knows '*'
        triplestore --wildcard ? remove facts.tsv ? knows bob
    """
    config = load_config(config_path)
    overrides = {}
    if wildcard is not None:
        overrides["wildcard"] = wildcard
    if log_level is not None:
        overrides["logging_level"] = log_level
    if overrides:
        config = StoreConfig.model_validate({**config.model_dump(), **overrides})

    set_global_log_level(config.logging_level)
    ctx.obj = config


@main.command()
@click.argument("file", type=click.File("r", encoding="utf-8"))
@click.pass_obj
def dump(config: StoreConfig, file: IO[str]):
    """Print every fact sorted by subject, predicate, object."""
    store = build_store(config, file)
    click.echo(store.render(), nl=False)


@main.command()
@click.argument("file", type=click.File("r", encoding="utf-8"))
@click.argument("subject")
@click.argument("predicate")
@click.argument("obj", metavar="OBJECT")
@click.pass_obj
def query(config: StoreConfig, file: IO[str], subject: str, predicate: str, obj: str):
    """Print the facts matching SUBJECT PREDICATE OBJECT."""
    store = build_store(config, file)
    results = store.query(subject, predicate, obj)
    for fact in results:
        click.echo(fact.render())


@main.command()
@click.argument("file", type=click.File("r", encoding="utf-8"))
@click.argument("subject")
@click.argument("predicate")
@click.argument("obj", metavar="OBJECT")
@click.pass_obj
def remove(config: StoreConfig, file: IO[str], subject: str, predicate: str, obj: str):
    """Remove the facts matching SUBJECT PREDICATE OBJECT and print the rest."""
    store = build_store(config, file)
    count = store.remove(subject, predicate, obj)
    click.echo(f"Removed {count} fact(s).")
    click.echo(store.render(), nl=False)


if __name__ == "__main__":
    main()
