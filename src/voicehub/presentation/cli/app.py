"""VoiceHub CLI application using Typer.

Operator utilities for the VoiceHub backend: database setup, serving
the API, and deciding on reviewer applications.
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import typer
import uvicorn
from rich.console import Console
from rich.table import Table
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from voicehub.infrastructure.persistence.sqlalchemy.init_db import (
    create_engine,
    create_tables,
)
from voicehub_config.settings import get_settings
from voicehub_identity.application.services import ReviewerReviewService
from voicehub_identity.domain.account import (
    Account,
    AccountNotFoundError,
    AccountStatus,
    InvalidEmailError,
    InvalidStatusTransitionError,
)
from voicehub_identity.infrastructure.email import EmailService
from voicehub_identity.infrastructure.persistence.sqlalchemy import (
    AccountRepositorySQLAlchemy,
)

app = typer.Typer(
    name="voicehub",
    help="VoiceHub - Common Voice Luo backend CLI",
    no_args_is_help=True,
)
console = Console()

db_app = typer.Typer(
    name="db",
    help="Database management",
    no_args_is_help=True,
)
app.add_typer(db_app)

reviewers_app = typer.Typer(
    name="reviewers",
    help="Review reviewer applications",
    no_args_is_help=True,
)
app.add_typer(reviewers_app)

STATUS_STYLES = {
    AccountStatus.ACTIVE: "green",
    AccountStatus.PENDING: "yellow",
    AccountStatus.REJECTED: "red",
}


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


@asynccontextmanager
async def _review_service() -> AsyncIterator[tuple[ReviewerReviewService, AsyncSession]]:
    """Yield a ReviewerReviewService bound to a fresh session."""
    settings = get_settings()
    engine = create_engine(settings)
    session_maker = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    try:
        async with session_maker() as session:
            service = ReviewerReviewService(
                account_repository=AccountRepositorySQLAlchemy(session),
                email_service=EmailService(settings),
                frontend_base_url=settings.frontend_base_url,
            )
            yield service, session
    finally:
        await engine.dispose()


async def _list(status: Optional[AccountStatus]) -> list[Account]:
    async with _review_service() as (service, _):
        return await service.list_reviewers(status)


async def _approve_or_reject(action: str, email: str) -> Account:
    async with _review_service() as (service, session):
        try:
            decide = service.approve if action == "approve" else service.reject
            reviewer = await decide(email)
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        # Only committed decisions reach the reviewer
        service.notify_decision(reviewer)
        return reviewer


def _styled_status(account: Account) -> str:
    style = STATUS_STYLES.get(account.status, "white")
    return f"[{style}]{account.status.value}[/{style}]"


def _decide(action: str, email: str) -> None:
    try:
        reviewer = asyncio.run(_approve_or_reject(action, email))
    except (AccountNotFoundError, InvalidEmailError):
        console.print(f"[red]No reviewer account found for {email}[/red]")
        raise typer.Exit(1) from None
    except InvalidStatusTransitionError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1) from None

    console.print(
        f"Reviewer [bold]{reviewer.email}[/bold] is now {_styled_status(reviewer)}"
    )


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@db_app.command("init")
def init_database() -> None:
    """Create all missing database tables."""
    asyncio.run(create_tables())
    console.print("[bold green]Database schema is up to date[/bold green]")


@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address"),
    port: Optional[int] = typer.Option(None, help="Bind port"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the HTTP API with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "voicehub.presentation.api.app:create_app",
        factory=True,
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


@reviewers_app.command("list")
def list_reviewers(
    status: Optional[AccountStatus] = typer.Option(
        None,
        "--status",
        "-s",
        help="Only show reviewers with this status",
        case_sensitive=False,
    ),
) -> None:
    """List reviewer accounts, oldest first."""
    reviewers = asyncio.run(_list(status))

    if not reviewers:
        console.print("[dim]No reviewers found.[/dim]")
        return

    table = Table(title="Reviewers")
    table.add_column("Email", style="cyan")
    table.add_column("Name")
    table.add_column("Status")
    table.add_column("Active")
    table.add_column("Created")

    for reviewer in reviewers:
        table.add_row(
            reviewer.email,
            reviewer.name or "",
            _styled_status(reviewer),
            "yes" if reviewer.is_active else "no",
            reviewer.created_at.strftime("%Y-%m-%d %H:%M"),
        )

    console.print(table)


@reviewers_app.command("approve")
def approve_reviewer(email: str = typer.Argument(..., help="Reviewer email")) -> None:
    """Approve a pending reviewer application."""
    _decide("approve", email)


@reviewers_app.command("reject")
def reject_reviewer(email: str = typer.Argument(..., help="Reviewer email")) -> None:
    """Reject a pending reviewer application."""
    _decide("reject", email)


def cli() -> None:
    """Entry point for the CLI application."""
    logging.basicConfig(level=logging.WARNING)
    app()


if __name__ == "__main__":
    cli()
