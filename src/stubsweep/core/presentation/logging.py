from typing import List

from rich.console import Console
from rich.markup import escape

from stubsweep.core.domain.models import DuplicateGroup, StubStatus

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)

NEXT_STEPS = (
    "Restart Strapi to ensure TypeScript files are loaded",
    "Test all API endpoints",
    "Check for any errors in the logs",
)


class CleanupFormatter:
    """Utility for formatting the cleanup banner, prompt and report."""

    @staticmethod
    def format_intro() -> List[str]:
        return [
            "[bold blue]🧹 Cleaning up duplicate files...[/bold blue]",
            "📋 Files to be removed:",
        ]

    @staticmethod
    def format_group(group: DuplicateGroup) -> List[str]:
        """Format one category heading followed by its annotated files."""
        lines = ["", f"[bold]{escape(group.name)}:[/bold]"]
        for f in group.files:
            lines.append(
                f"  - [cyan]{escape(f.path)}[/cyan] ({escape(f.annotation)})"
            )
        return lines

    @staticmethod
    def format_prompt() -> str:
        return "[yellow]⚠️  Are you sure you want to remove these files? (y/N)[/yellow] "

    @staticmethod
    def format_remove_failure(path: str, error: OSError) -> str:
        return f"[red]✖ Could not remove {escape(path)}: {escape(str(error))}[/red]"

    @staticmethod
    def format_success() -> List[str]:
        lines = [
            "[bold green]✅ Duplicate files removed successfully![/bold green]",
            "",
            "📝 Next steps:",
        ]
        lines.extend(f"{i}. {step}" for i, step in enumerate(NEXT_STEPS, start=1))
        return lines

    @staticmethod
    def format_cancelled() -> str:
        return "[red]❌ Cleanup cancelled[/red]"

    @staticmethod
    def format_status(status: StubStatus) -> str:
        """Format a single line of the read-only check report."""
        f = status.file
        if status.present:
            mark = "[yellow]● present[/yellow]"
        else:
            mark = "[green]✔ removed[/green]"
        if status.replacement_present:
            repl = f"[green]{escape(f.replacement)} found[/green]"
        else:
            repl = f"[red]{escape(f.replacement)} missing[/red]"
        return f"  {mark}  {escape(f.path)} ({repl})"
