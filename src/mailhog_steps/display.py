"""Rich-based display functions for MailHog Steps."""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from .models import EmailView

console = Console()


def display_email(view: EmailView, title: str = "Last Email") -> None:
    """Print every field of an email, HTML body last."""
    lines = [
        f"[bold]Date:[/bold] {escape(view.date)}",
        f"[bold]From:[/bold] {escape(view.from_)}",
        f"[bold]To:[/bold] {escape(view.to)}",
        f"[bold]Subject:[/bold] {escape(view.subject)}",
        "",
        "[bold]HTML:[/bold]",
        escape(view.html) if view.html else "[dim](empty)[/dim]",
    ]

    console.print(Panel("\n".join(lines), title=title))
