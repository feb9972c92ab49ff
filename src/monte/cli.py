"""
Command-line interface for the Monte Carlo Tree Search engine.

Commands:
- list-games: Show the registered games
- play: Let the engine play a game against itself
- arena: Match two scoring strategies against each other
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional
import typer
from rich.console import Console
from rich.table import Table

app = typer.Typer(
    name="monte",
    help="Monte Carlo Tree Search - play any turn-based game",
    no_args_is_help=True,
)

console = Console()


def _load_config(config_path: Optional[Path]):
    from .utils import Config

    if config_path is not None:
        if not config_path.exists():
            console.print(f"[red]Config file not found: {config_path}[/]")
            raise typer.Exit(1)
        return Config.load(str(config_path))
    return Config()


@app.command("list-games")
def list_games_cmd() -> None:
    """List all available games."""
    from .games import list_games, get_game

    table = Table(title="Available Games")
    table.add_column("Name", style="cyan")
    table.add_column("Players", style="green")
    table.add_column("Opening moves", style="yellow")

    for name in list_games():
        game = get_game(name)
        table.add_row(name, str(game.num_players()), str(len(game.legal_moves())))

    console.print(table)


@app.command()
def play(
    game_name: Optional[str] = typer.Argument(None, help="Game to play (e.g., 'tictactoe', 'connect4')"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to config YAML file"),
    cycles: Optional[int] = typer.Option(None, "--cycles", "-n", help="Simulation passes per move"),
    strategy: Optional[str] = typer.Option(None, "--strategy", "-s", help="ucb1/random/explore-first"),
    exploration: Optional[float] = typer.Option(None, "--exploration", "-e", help="UCB1 exploration constant"),
    reuse_tree: Optional[bool] = typer.Option(None, "--tree/--no-tree", help="Keep the search tree between moves"),
    show_tree: Optional[bool] = typer.Option(None, "--show-tree/--hide-tree", help="Print the tree after each move"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed"),
    log_dir: Optional[Path] = typer.Option(None, "--log-dir", help="Write a JSON lines move log here"),
    debug: bool = typer.Option(False, "--debug", help="Print search summaries"),
) -> None:
    """Let the engine play a game against itself."""
    from dataclasses import replace
    from .games import get_game
    from .mcts import MCTS
    from .eval import play_game
    from .utils import Logger, make_rng, make_strategy, print_board, print_config, print_tree, set_seed

    config = _load_config(config_path)

    # Command line overrides the config file
    try:
        config.mcts = replace(
            config.mcts,
            cycles=cycles if cycles is not None else config.mcts.cycles,
            strategy=strategy if strategy is not None else config.mcts.strategy,
            exploration=exploration if exploration is not None else config.mcts.exploration,
        )
        game = get_game(game_name if game_name is not None else config.play.game)
    except ValueError as e:
        console.print(f"[red]{e}[/]")
        raise typer.Exit(1)

    if reuse_tree is not None:
        config.play.reuse_tree = reuse_tree
    if show_tree is not None:
        config.play.show_tree = show_tree
    if seed is not None:
        config.seed = seed

    if config.verbose:
        print_config(config)

    if config.seed is not None:
        set_seed(config.seed)
    rng = make_rng(config.seed)
    logger = Logger(
        verbose=config.verbose,
        debug=debug,
        log_dir=str(log_dir) if log_dir is not None else None,
    )
    engine = MCTS(game, make_strategy(config.mcts, rng), rng=rng, logger=logger)

    mode = "Tree" if config.play.reuse_tree else "Tree-less"
    console.print(f"[blue]{mode} game, {config.mcts.cycles} cycles per move[/]")
    print_board(game.render(), title="Start")

    def on_move(state, tree) -> None:
        print_board(state.render(), title=f"After {tree.choice!r}")
        if config.play.show_tree:
            print_tree(tree)

    result = play_game(
        game,
        [engine] * game.num_players(),
        config.mcts.cycles,
        reuse_tree=config.play.reuse_tree,
        logger=logger,
        on_move=on_move,
    )

    if result.winner:
        console.print(f"[green]Winner: player {result.winner}[/] after {result.num_moves} moves")
    else:
        console.print(f"[yellow]Draw[/] after {result.num_moves} moves")


@app.command()
def arena(
    game_name: str = typer.Argument("tictactoe", help="Two-player game to play"),
    strategy_a: str = typer.Option("ucb1", "--a", help="First strategy"),
    strategy_b: str = typer.Option("random", "--b", help="Second strategy"),
    games: int = typer.Option(10, "--games", "-g", help="Number of games"),
    cycles: int = typer.Option(200, "--cycles", "-n", help="Simulation passes per move"),
    exploration: float = typer.Option(1.41, "--exploration", "-e", help="UCB1 exploration constant"),
    reuse_tree: bool = typer.Option(True, "--tree/--no-tree", help="Keep trees between moves"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed"),
) -> None:
    """Match two scoring strategies against each other."""
    from .games import get_game
    from .mcts import get_strategy
    from .eval import Arena
    from .utils import make_rng, create_progress, set_seed

    if seed is not None:
        set_seed(seed)
    rng = make_rng(seed)
    try:
        game = get_game(game_name)
        a = get_strategy(strategy_a, exploration=exploration, rng=rng)
        b = get_strategy(strategy_b, exploration=exploration, rng=rng)
    except ValueError as e:
        console.print(f"[red]{e}[/]")
        raise typer.Exit(1)

    match = Arena(cycles=cycles, reuse_tree=reuse_tree, rng=rng)

    with create_progress() as progress:
        task = progress.add_task(f"{strategy_a} vs {strategy_b}", total=games)

        def on_game(done: int, result: str) -> None:
            progress.update(task, completed=done)

        try:
            outcome = match.evaluate(game, a, b, num_games=games, progress_callback=on_game)
        except ValueError as e:
            console.print(f"[red]{e}[/]")
            raise typer.Exit(1)

    table = Table(title=f"{game_name}: {strategy_a} vs {strategy_b}")
    table.add_column("Wins", style="green")
    table.add_column("Losses", style="red")
    table.add_column("Draws", style="yellow")
    table.add_column("Score", style="cyan")
    table.add_row(
        str(outcome.wins),
        str(outcome.losses),
        str(outcome.draws),
        f"{outcome.score*100:.1f}%",
    )
    console.print(table)


if __name__ == "__main__":
    app()
