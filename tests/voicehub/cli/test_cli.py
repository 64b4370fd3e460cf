"""Tests for the voicehub CLI."""

import asyncio
from unittest.mock import AsyncMock, patch

import pytest
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from typer.testing import CliRunner

from voicehub.infrastructure.persistence.sqlalchemy.init_db import create_engine
from voicehub.presentation.cli.app import app
from voicehub_config import clear_settings_cache, get_settings
from voicehub_identity.domain.account import Account, AccountRole, AccountStatus
from voicehub_identity.infrastructure.persistence.sqlalchemy import (
    AccountRepositorySQLAlchemy,
)

runner = CliRunner()


@pytest.fixture(autouse=True)
def sqlite_database(tmp_path, monkeypatch):
    """Point the CLI at a throwaway SQLite file and create the schema."""
    monkeypatch.setenv("DATABASE_BACKEND", "sqlite")
    monkeypatch.setenv("SQLITE_PATH", str(tmp_path / "data" / "voicehub.db"))
    monkeypatch.setenv("SMTP_ENABLED", "false")

    result = runner.invoke(app, ["db", "init"])
    assert result.exit_code == 0, result.output
    assert (tmp_path / "data" / "voicehub.db").exists()


def _run(coro_factory):
    async def _with_repo():
        engine = create_engine(get_settings())
        try:
            async with async_sessionmaker(engine, expire_on_commit=False)() as session:
                result = await coro_factory(AccountRepositorySQLAlchemy(session))
                await session.commit()
                return result
        finally:
            await engine.dispose()

    return asyncio.run(_with_repo())


def seed(account: Account) -> Account:
    async def _save(repo):
        await repo.save(account)

    _run(_save)
    return account


def load(email: str) -> Account | None:
    async def _find(repo):
        return await repo.find_by_email_and_role(email, AccountRole.REVIEWER)

    return _run(_find)


def test_db_init_is_idempotent():
    result = runner.invoke(app, ["db", "init"])

    assert result.exit_code == 0
    assert "up to date" in result.output


def test_list_reviewers_empty():
    result = runner.invoke(app, ["reviewers", "list"])

    assert result.exit_code == 0
    assert "No reviewers found" in result.output


def test_list_reviewers_by_status():
    seed(Account.register_oauth_reviewer("pending@example.com"))
    seed(Account(email="active@example.com", status=AccountStatus.ACTIVE))

    result = runner.invoke(app, ["reviewers", "list", "--status", "pending"])

    assert result.exit_code == 0
    assert "pending@example.com" in result.output
    assert "active@example.com" not in result.output


def test_approve_pending_reviewer():
    seed(Account.register_oauth_reviewer("pending@example.com"))

    result = runner.invoke(app, ["reviewers", "approve", "Pending@Example.com"])

    assert result.exit_code == 0, result.output
    assert "active" in result.output
    assert load("pending@example.com").status == AccountStatus.ACTIVE


def test_reject_pending_reviewer():
    seed(Account.register_oauth_reviewer("pending@example.com"))

    result = runner.invoke(app, ["reviewers", "reject", "pending@example.com"])

    assert result.exit_code == 0, result.output
    assert load("pending@example.com").status == AccountStatus.REJECTED


def test_approve_emails_reviewer_after_commit():
    seed(Account.register_oauth_reviewer("pending@example.com", name="Akinyi"))

    with patch("voicehub.presentation.cli.app.EmailService") as email_service_cls:
        result = runner.invoke(app, ["reviewers", "approve", "pending@example.com"])

    assert result.exit_code == 0, result.output
    email_service = email_service_cls.return_value
    email_service.send_reviewer_approved_email.assert_called_once()
    kwargs = email_service.send_reviewer_approved_email.call_args.kwargs
    assert kwargs["to_email"] == "pending@example.com"
    assert kwargs["reviewer_name"] == "Akinyi"


def test_failed_commit_sends_no_email():
    seed(Account.register_oauth_reviewer("pending@example.com"))

    with (
        patch("voicehub.presentation.cli.app.EmailService") as email_service_cls,
        patch.object(
            AsyncSession,
            "commit",
            AsyncMock(side_effect=SQLAlchemyError("disk I/O error")),
        ),
    ):
        result = runner.invoke(app, ["reviewers", "reject", "pending@example.com"])

    assert result.exit_code != 0
    assert isinstance(result.exception, SQLAlchemyError)
    email_service = email_service_cls.return_value
    email_service.send_reviewer_rejected_email.assert_not_called()
    email_service.send_reviewer_approved_email.assert_not_called()
    assert load("pending@example.com").status == AccountStatus.PENDING


def test_approve_unknown_reviewer():
    result = runner.invoke(app, ["reviewers", "approve", "ghost@example.com"])

    assert result.exit_code == 1
    assert "No reviewer account found" in result.output


def test_cannot_approve_rejected_reviewer():
    seed(Account(email="rejected@example.com", status=AccountStatus.REJECTED))

    result = runner.invoke(app, ["reviewers", "approve", "rejected@example.com"])

    assert result.exit_code == 1
    assert load("rejected@example.com").status == AccountStatus.REJECTED


def test_serve_runs_app_factory(monkeypatch):
    monkeypatch.setenv("API_PORT", "9001")
    clear_settings_cache()

    with patch("voicehub.presentation.cli.app.uvicorn.run") as run:
        result = runner.invoke(app, ["serve", "--host", "127.0.0.1"])

    assert result.exit_code == 0, result.output
    run.assert_called_once()
    args, kwargs = run.call_args
    assert args == ("voicehub.presentation.api.app:create_app",)
    assert kwargs["factory"] is True
    assert kwargs["host"] == "127.0.0.1"
    assert kwargs["port"] == 9001
