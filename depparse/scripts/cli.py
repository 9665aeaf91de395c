import json

import click

from depparse.models.parser_factory import ParserFactory
from depparse.utils.constants import config
from depparse.utils.logs import setup_logging

ALGORITHMS = ParserFactory.available()


def load_tagger(spacy_model: str = None):
    """The spaCy tagger named on the command line, or the one from config.yaml."""
    from depparse.data.tagger import SpacyTagger

    tagger = SpacyTagger(spacy_model) if spacy_model else SpacyTagger.from_config(config)
    try:
        return tagger.load()
    except RuntimeError as e:
        raise click.ClickException(str(e))


@click.group()
@click.option('--log-level', default=None,
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              help='Console log level (overrides config.yaml)')
def cli(log_level: str):
    """POS-driven dependency parsing."""
    setup_logging(print_level=log_level.upper() if log_level else None)


@cli.command()
@click.argument('texts', nargs=-1, required=True)
@click.option('--algorithm', '-a', default=None,
              type=click.Choice(ALGORITHMS + ['chu-liu'], case_sensitive=False),
              help='Parsing algorithm (overrides config.yaml)')
@click.option('--max-samples', default=None, type=int, help='Maximum number of samples to parse')
@click.option('--json', 'as_json', is_flag=True, help='Print the full result as JSON')
@click.option('--spacy-model', default=None, help='spaCy pipeline used for tagging (overrides config.yaml)')
def parse(texts, algorithm: str, max_samples: int, as_json: bool, spacy_model: str):
    """Parse TEXTS and print the tree of the first parsed sentence.

    \b
    ALGORITHMS:
      eisner        - greedy projective (no crossing arcs)
      eisner-dp     - Eisner's O(n^3) dynamic program (optimal projective)
      arborescence  - Chu-Liu/Edmonds maximum spanning arborescence
      greedy-heads  - best incoming arc per token (may contain cycles)
      arc-standard  - shift-reduce transition parser
    """
    from depparse.parsing import ParseConfig, parse_samples

    parse_config = ParseConfig.from_config(config, algorithm=algorithm, max_samples=max_samples)
    result = parse_samples(list(texts), config=parse_config, tagger=load_tagger(spacy_model))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
        return

    if result.total_processed == 0:
        click.echo("No sentences could be parsed.")
        return

    click.echo(f"Algorithm: {result.algorithm} | parsed: {result.total_processed} | skipped: {result.total_skipped}")
    click.echo(f"Sentence: {result.sentences[0]}")
    for edge in result.representative_result.edges:
        click.echo(f"  {edge.source:>20} -> {edge.target:<20} {edge.label or '':<8} {edge.weight:.3f}")


@cli.command()
@click.argument('conllu_file', type=click.Path(exists=True, dir_okay=False))
@click.option('--algorithm', '-a', 'algorithms', multiple=True,
              type=click.Choice(ALGORITHMS, case_sensitive=False),
              help='Algorithm(s) to evaluate (default: all)')
def evaluate(conllu_file: str, algorithms):
    """Evaluate algorithms against a gold CoNLL-U treebank."""
    from depparse.data.loader import load_sentences
    from depparse.evaluation.evaluator import Evaluator

    sentences = load_sentences(conllu_file)
    results = Evaluator(algorithms=algorithms or None).evaluate(sentences)

    click.echo(f"{'Algorithm':<14} {'UAS':>8} {'LAS':>8} {'Trees':>8} {'Sent/s':>10}")
    for name, r in results.items():
        click.echo(f"{name:<14} {r['uas']:7.2f}% {r['las']:7.2f}% {r['tree_rate']:7.1f}% {r['speed']:10.1f}")


@cli.command()
@click.option('--samples', '-n', default=1000, type=int, help='Number of generated samples')
@click.option('--runs', '-r', default=10, type=int, help='Timed runs per configuration')
@click.option('--fraction', '-f', 'fractions', multiple=True, type=float,
              help='Sample fractions to time (default: 0.2 0.4 0.6 0.8)')
@click.option('--algorithm', '-a', 'algorithms', multiple=True,
              type=click.Choice(ALGORITHMS, case_sensitive=False),
              help='Algorithm(s) to profile (default: all)')
@click.option('--seed', default=42, type=int, help='Random seed')
@click.option('--spacy-model', default=None, help='spaCy pipeline used for tagging (overrides config.yaml)')
def profile(samples: int, runs: int, fractions, algorithms, seed: int, spacy_model: str):
    """Time every algorithm on full and sampled synthetic datasets."""
    from depparse.scripts.profile import profile_algorithms, DEFAULT_FRACTIONS

    report = profile_algorithms(
        n_samples=samples,
        runs=runs,
        fractions=fractions or DEFAULT_FRACTIONS,
        algorithms=algorithms or None,
        seed=seed,
        tagger=load_tagger(spacy_model),
    )

    for name, data in report.items():
        full = data['full']
        click.echo(f"\n{name}: full {full['mean_ms']:.2f} ± {full['std_ms']:.2f} ms")
        for fraction, summary in data['fractions'].items():
            click.echo(f"  {fraction:>4.0%}: {summary['mean_ms']:.2f} ± {summary['std_ms']:.2f} ms, "
                       f"agreement {summary['agreement']:.1f}%")


if __name__ == '__main__':
    cli()
