import asyncio

import typer
import uvicorn
from rich.console import Console
from rich.markdown import Markdown

from brainstormai.factory import create_calendar_service, create_orchestrator, create_token_store
from brainstormai.services.token_store import InMemoryTokenStore
from brainstormai.utils.config import config

app = typer.Typer(help="Brainstorm business ideas and schedule events with a persona.")
console = Console()


@app.command()
def chat(
    message: str,
    persona: str = typer.Option(config.default_persona, help="Persona to answer as"),
    user: str = typer.Option(config.default_user_id, help="User whose calendar tokens are used"),
):
    """
    Send one message to the persona and print the reply.

    Calendar requests need the user's tokens in a shared store. With the
    default TOKEN_STORE=memory the CLI starts with an empty store, so set
    TOKEN_STORE=mongodb and connect through the server first.
    """
    token_store = create_token_store()
    if isinstance(token_store, InMemoryTokenStore):
        console.print(
            "[yellow]Using the in-memory token store: calendar tokens saved by the server are not "
            "visible here, so event requests will ask you to connect Google Calendar. "
            "Set TOKEN_STORE=mongodb to schedule events from the CLI.[/yellow]"
        )
    orchestrator = create_orchestrator(token_store)
    result = asyncio.run(orchestrator.respond(persona, message, user))

    if not result.succeeded:
        console.print(f"[bold red]{result.text}[/bold red]")
        raise typer.Exit(code=1)

    console.print(f"[bold green]{persona}[/bold green] ({result.attempts} attempt(s))")
    console.print(Markdown(result.text))


@app.command("auth-url")
def auth_url(user: str = typer.Option(config.default_user_id, help="User to authorize")):
    """
    Print the Google consent URL for connecting a calendar.
    """
    typer.echo(create_calendar_service().generate_auth_url(state=user))


@app.command()
def serve(
    host: str = typer.Option(config.app_host, help="Interface to bind"),
    port: int = typer.Option(config.app_port, help="Port to listen on"),
):
    """
    Run the HTTP API.
    """
    typer.echo(f"Starting BrainstormAI API on {host}:{port}")
    uvicorn.run("brainstormai.server:create_app", factory=True, host=host, port=port)
