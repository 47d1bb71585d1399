"""
Command line entry point for the graph poet.

    graph-poet --corpus mugar.txt "Test the system."
    echo "Test the system." | graph-poet --config poet.yml --representation vertices
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import click

from graph import REPRESENTATIONS
from poet import CorpusReadError, GraphPoet
from poet_config import ConfigError, PoetConfig, load_config


logger = logging.getLogger(__name__)


@click.command(name="graph-poet")
@click.argument("text", required=False)
@click.option("--corpus", type=click.Path(path_type=Path), help="Corpus text file")
@click.option("--config", "config_path", type=click.Path(path_type=Path), help="YAML config file")
@click.option(
    "--representation",
    type=click.Choice(REPRESENTATIONS),
    default=None,
    help="Graph representation backing the affinity graph",
)
@click.option("--show-graph", is_flag=True, help="Print the affinity graph before the poem")
@click.option("--verbose", is_flag=True, help="Enable debug logging")
def main(
    text: Optional[str],
    corpus: Optional[Path],
    config_path: Optional[Path],
    representation: Optional[str],
    show_graph: bool,
    verbose: bool,
) -> None:
    """Insert bridge words from CORPUS into TEXT (read from stdin if omitted)."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    cfg = PoetConfig()
    if config_path is not None:
        try:
            cfg = load_config(config_path)
        except (ConfigError, OSError) as exc:
            raise click.ClickException(str(exc)) from exc

    corpus = corpus or cfg.corpus
    if corpus is None:
        raise click.UsageError("no corpus given; pass --corpus or set it in --config")
    representation = representation or cfg.representation

    try:
        poet = GraphPoet.from_file(corpus, representation=representation, encoding=cfg.encoding)
    except CorpusReadError as exc:
        raise click.ClickException(str(exc)) from exc
    logger.debug("using %s representation for %s", representation, corpus)

    if text is None:
        text = click.get_text_stream("stdin").read()

    if show_graph:
        click.echo(str(poet))
    click.echo(poet.poem(text))


if __name__ == "__main__":
    main()
