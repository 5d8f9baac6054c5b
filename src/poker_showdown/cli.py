"""Command-line interface for hand evaluation."""

import json
import logging
import sys
from pathlib import Path

import click

from poker_showdown.core.codec import parse_card
from poker_showdown.core.hand import PlayerEntry
from poker_showdown.errors import HandEvaluationError
from poker_showdown.evaluation.evaluation_config import EvaluationConfigLoader
from poker_showdown.evaluation.evaluator import HandEvaluator
from poker_showdown.evaluation.hand_description import HandDescriber

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def _fail(error: HandEvaluationError) -> None:
    raise click.ClickException(f"{error.tag}: {error}")


@click.group()
@click.option('--config', 'config_path', type=click.Path(dir_okay=False, path_type=Path),
              default=None, help='Evaluation configuration JSON file')
@click.option('-v', '--verbose', is_flag=True, help='Enable debug logging')
@click.pass_context
def cli(ctx, config_path, verbose):
    """Poker hand evaluation and showdown resolution."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True
    )
    try:
        config = EvaluationConfigLoader(config_path).load()
    except HandEvaluationError as e:
        _fail(e)
    ctx.obj = HandEvaluator(config)


@cli.command('best-hand')
@click.argument('cards', nargs=-1)
@click.option('--detailed', is_flag=True, help='Include a detailed hand description')
@click.pass_obj
def best_hand(hand_evaluator, cards, detailed):
    """Show the best hand in CARDS (codes like 1014 or strings like Ah)."""
    try:
        parsed = [parse_card(token) for token in cards]
        result = hand_evaluator.best_hand(parsed)
    except HandEvaluationError as e:
        _fail(e)

    output = result.to_json()
    if detailed:
        output["detailedDescription"] = HandDescriber(hand_evaluator).describe_result(result)
    click.echo(json.dumps(output, indent=2))


@cli.command()
@click.option('--player', 'players', multiple=True, required=True, metavar='ID:CARDS',
              help='Player id and comma separated cards, e.g. alice:Ah,Kh,Qh,Jh,Th')
@click.pass_obj
def winners(hand_evaluator, players):
    """Resolve the winner(s) among players."""
    entries = []
    for spec in players:
        player_id, sep, hand_str = spec.partition(':')
        if not sep or not player_id:
            raise click.BadParameter(f"Expected ID:CARDS, got '{spec}'", param_hint='--player')
        try:
            entries.append(PlayerEntry.from_string(player_id, hand_str))
        except HandEvaluationError as e:
            _fail(e)

    try:
        result = hand_evaluator.resolve_winners(entries)
    except HandEvaluationError as e:
        _fail(e)

    click.echo(json.dumps(result.to_json(), indent=2))


def main():
    cli()
