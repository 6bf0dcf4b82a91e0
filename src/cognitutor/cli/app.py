"""Main CLI application using Typer."""
import asyncio
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.table import Table

from ..memory import create_session_store
from ..tutor import ChatContext, TutorReply, TutorService
from .providers import get_tutor

# Load environment variables
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="cognitutor",
    help="AI tutor with a remote-first, offline-fallback response engine",
    no_args_is_help=True,
    add_completion=True,
)

# Console for rich output
console = Console()

OFFLINE_OPTION = typer.Option(
    False,
    "--offline",
    help="Never call the remote provider"
)


def _context(subject: str | None, topic: str | None, recent_test: str | None = None) -> ChatContext:
    return ChatContext(current_subject=subject, current_topic=topic, recent_test=recent_test)


def _print_reply(reply: TutorReply) -> None:
    if reply.model:
        source = f"{reply.source.value} ({reply.model})"
    elif reply.subject:
        source = f"{reply.source.value} / {reply.subject.value}"
    else:
        source = reply.source.value
    console.print(Panel(
        Markdown(reply.text),
        title="[bold green]Tutor[/bold green]",
        subtitle=f"[dim]{source}[/dim]",
        border_style="green"
    ))


@app.command()
def ask(
    message: str = typer.Argument(..., help="Question for the tutor"),
    subject: str | None = typer.Option(None, "--subject", "-s", help="Subject being studied"),
    topic: str | None = typer.Option(None, "--topic", "-t", help="Topic being studied"),
    recent_test: str | None = typer.Option(None, "--recent-test", help="Recently taken test"),
    offline: bool = OFFLINE_OPTION,
):
    """Ask the tutor a single question."""
    async def _ask():
        async with get_tutor(console, offline=offline) as tutor:
            reply = await tutor.generate_reply(message, _context(subject, topic, recent_test))
            _print_reply(reply)

    asyncio.run(_ask())


@app.command()
def chat(
    subject: str | None = typer.Option(None, "--subject", "-s", help="Subject being studied"),
    topic: str | None = typer.Option(None, "--topic", "-t", help="Topic being studied"),
    offline: bool = OFFLINE_OPTION,
):
    """Interactive chat session with the tutor."""
    async def _chat():
        store = create_session_store("memory")
        context = _context(subject, topic)

        async with get_tutor(console, offline=offline) as tutor:
            mode = "online" if tutor.state.is_available else "offline"
            console.print(f"[bold cyan]CogniLearn AI Tutor[/bold cyan] [dim]({mode})[/dim]")
            console.print("[dim]Type 'exit', 'quit', or 'q' to leave, 'clear' to reset history[/dim]\n")

            while True:
                try:
                    user_input = console.input("[bold yellow]You:[/bold yellow] ")

                    if not user_input.strip():
                        continue

                    command = user_input.strip().lower()
                    if command in ('exit', 'quit', 'q'):
                        console.print("[dim]Goodbye![/dim]")
                        break
                    if command == 'clear':
                        await store.clear()
                        console.print("[dim]History cleared.[/dim]")
                        continue

                    history = await store.get_history(limit=10)
                    reply = await tutor.generate_reply(user_input, context, history)
                    await store.record_exchange(user_input, reply.text)
                    _print_reply(reply)

                except KeyboardInterrupt:
                    console.print("\n[dim]Goodbye![/dim]")
                    break
                except EOFError:
                    console.print("\n[dim]Goodbye![/dim]")
                    break

    asyncio.run(_chat())


@app.command(name="analyze-image")
def analyze_image(
    image: Path = typer.Argument(
        ...,
        exists=True,
        file_okay=True,
        dir_okay=False,
        help="Image file to analyze"
    ),
    context: str | None = typer.Option(None, "--context", "-c", help="What the image is about"),
    offline: bool = OFFLINE_OPTION,
):
    """Ask the tutor to explain an image."""
    async def _analyze():
        async with get_tutor(console, offline=offline) as tutor:
            text = await tutor.analyze_image(image.read_bytes(), context)
            console.print(Panel(Markdown(text), title="[bold green]Tutor[/bold green]", border_style="green"))

    asyncio.run(_analyze())


@app.command()
def probe():
    """Probe the configured model candidates and show the provider state."""
    async def _probe():
        tutor: TutorService = get_tutor(console)
        try:
            with console.status("[dim]Probing remote provider...[/dim]"):
                state = await tutor.initialize()

            table = Table(show_header=False, box=None)
            table.add_column("Field", style="bold cyan", width=15)
            table.add_column("Value")
            table.add_row("Status", state.status.value)
            table.add_row("Available", "yes" if state.is_available else "no")
            table.add_row("Model", state.active_model or "-")
            console.print(table)

            if not state.is_available:
                raise typer.Exit(code=1)
        finally:
            await tutor.close()

    asyncio.run(_probe())


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
