"""
Logging utilities with rich formatting.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, asdict
from datetime import datetime
from pathlib import Path
from typing import Optional, Any, TYPE_CHECKING

from rich.console import Console
from rich.table import Table
from rich.tree import Tree
from rich.progress import (
    Progress,
    SpinnerColumn,
    TextColumn,
    BarColumn,
    MofNCompleteColumn,
    TimeElapsedColumn,
)
from rich.panel import Panel

if TYPE_CHECKING:
    from ..mcts.node import Node


console = Console()


@dataclass
class MoveRecord:
    """One engine move in a game."""

    move_number: int
    player: int
    choice: Any
    cycles: int
    visits: float  # Visits of the chosen child
    win_rate: float
    elapsed: float
    timestamp: str = ""

    def __post_init__(self):
        if not self.timestamp:
            self.timestamp = datetime.now().isoformat()


class Logger:
    """
    Game logger with rich output and optional JSON lines logging.

    Args:
        verbose: Whether to print to console
        debug: Whether to print debug messages (per-move search summaries)
        log_dir: Directory for move logs (None = no file)
    """

    def __init__(
        self,
        verbose: bool = True,
        debug: bool = False,
        log_dir: Optional[str] = None,
    ):
        self.verbose = verbose
        self.debug = debug

        self.log_file: Optional[Path] = None
        if log_dir is not None:
            path = Path(log_dir)
            path.mkdir(parents=True, exist_ok=True)
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            self.log_file = path / f"game_{timestamp}.jsonl"

        self.moves: list[MoveRecord] = []

    def log_move(self, record: MoveRecord) -> None:
        """Log one engine move."""
        self.moves.append(record)

        if self.log_file is not None:
            with open(self.log_file, "a") as f:
                f.write(json.dumps(asdict(record), default=repr) + "\n")

        if self.verbose:
            console.print(
                f"[cyan]Move {record.move_number}[/] player {record.player} "
                f"-> [bold]{record.choice!r}[/] "
                f"(win rate {record.win_rate:.3f}, "
                f"{record.visits:.0f} visits, {record.elapsed:.2f}s)"
            )

    def log_message(self, message: str, style: str = "white") -> None:
        """Log a message."""
        if self.verbose:
            console.print(f"[{style}]{message}[/]")

    def log_debug(self, message: str) -> None:
        """Log debug message."""
        if self.debug:
            self.log_message(message, "dim")

    def log_info(self, message: str) -> None:
        """Log info message."""
        self.log_message(message, "blue")

    def log_success(self, message: str) -> None:
        """Log success message."""
        self.log_message(message, "green")

    def log_warning(self, message: str) -> None:
        """Log warning message."""
        self.log_message(message, "yellow")

    def log_error(self, message: str) -> None:
        """Log error message."""
        self.log_message(message, "red")


def create_progress() -> Progress:
    """Create a rich progress bar with elapsed time."""
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        MofNCompleteColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=False,
    )


def print_config(config: Any) -> None:
    """Print configuration in a nice format."""
    table = Table(title="Configuration", show_header=True)
    table.add_column("Parameter", style="cyan")
    table.add_column("Value", style="white")

    def add_dict(d: dict, prefix: str = "") -> None:
        for k, v in d.items():
            key = f"{prefix}{k}" if prefix else k
            if isinstance(v, dict):
                add_dict(v, f"{key}.")
            else:
                table.add_row(key, str(v))

    add_dict(asdict(config))
    console.print(table)


def print_board(board_str: str, title: str = "Board") -> None:
    """Print a game board in a panel."""
    console.print(Panel(board_str, title=title, border_style="blue"))


def _node_label(node: Node) -> str:
    if node.winner is not None:
        return (
            f"[cyan]{node.choice!r}[/] winner=[bold]{node.winner}[/] "
            f"visits={node.visits:g}"
        )
    wins = ", ".join(f"{w:g}" for w in node.wins)
    return f"[cyan]{node.choice!r}[/] wins=[{wins}] visits={node.visits:g}"


def build_tree(node: Node, max_depth: int = 1) -> Tree:
    """
    Build a rich Tree of a search tree.

    Unvisited children are skipped; they carry no statistics.
    """
    tree = Tree(_node_label(node))

    def add_children(branch: Tree, parent: Node, depth: int) -> None:
        if depth >= max_depth:
            return
        for child in parent.children:
            if child.visits == 0:
                continue
            add_children(branch.add(_node_label(child)), child, depth + 1)

    add_children(tree, node, 0)
    return tree


def print_tree(node: Node, max_depth: int = 1) -> None:
    """Print a search tree down to max_depth levels below node."""
    console.print(build_tree(node, max_depth))
