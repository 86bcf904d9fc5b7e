#!/usr/bin/env python3
"""
Rich UI components for CLI - consistent interface across all commands.
"""

from __future__ import annotations

from rich import box
from rich.console import Console
from rich.table import Table

from vaultviews.helpers.dto.views_dto import TagStat, ThingRow, ViewLink

console = Console()

# Color scheme constants
COLOR_SUCCESS = "green"
COLOR_ERROR = "red"
COLOR_WARNING = "yellow"
COLOR_INFO = "cyan"
COLOR_UNINITIATED = "dim"


class TableDisplay:
    """
    Formatted tables for lists (views, things, tags).
    """

    @staticmethod
    def show_views(links: list[ViewLink], title: str = "Views"):
        """Display the views navigation list; uninitiated views are dimmed."""
        table = Table(title=title, box=box.ROUNDED, show_header=True, header_style="bold")
        table.add_column("View", overflow="fold")
        table.add_column("Link", style=COLOR_INFO, overflow="fold")

        for link in links:
            label = link.label if link.initiated else f"[{COLOR_UNINITIATED}]{link.label}[/{COLOR_UNINITIATED}]"
            table.add_row(label, link.target)

        console.print(table)

    @staticmethod
    def show_things(rows: list[ThingRow], view_name: str):
        """Display the things of a view."""
        table = Table(title=view_name, box=box.ROUNDED, show_header=True, header_style="bold")
        table.add_column("Name", style="bold")
        table.add_column("Tags", style=COLOR_INFO, overflow="fold")
        table.add_column("Path", overflow="fold")

        for row in rows:
            table.add_row(row.name, row.tags_text, row.path)

        console.print(table)

    @staticmethod
    def show_tags(stats: list[TagStat]):
        """Display tag counts."""
        table = Table(title="Tags", box=box.ROUNDED, show_header=True, header_style="bold")
        table.add_column("Tag", style=COLOR_INFO)
        table.add_column("Count", justify="right")
        table.add_column("View")

        for stat in stats:
            table.add_row(f"#{stat.tag}", str(stat.count), stat.view_name)

        console.print(table)


def print_success(message: str):
    """Print a success message."""
    console.print(f"[bold {COLOR_SUCCESS}]✓[/bold {COLOR_SUCCESS}] {message}")


def print_error(message: str):
    """Print an error message."""
    console.print(f"[bold {COLOR_ERROR}]✗[/bold {COLOR_ERROR}] {message}")


def print_warning(message: str):
    """Print a warning message."""
    console.print(f"[bold {COLOR_WARNING}]⚠[/bold {COLOR_WARNING}] {message}")


def print_info(message: str):
    """Print an info message."""
    console.print(f"[{COLOR_INFO}]ℹ[/{COLOR_INFO}] {message}")
