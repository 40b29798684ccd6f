"""Tests for the administrative commands."""

import pytest

from confsite.cli import build_parser, run
from confsite.config import Settings
from confsite.db import Database
from confsite.services.auth import AdminAccountService, AuthService
from confsite.services.csv_transfer import TransferDataset


@pytest.fixture
def cli_settings(tmp_path) -> Settings:
    return Settings(
        _env_file=None,
        database_uri=f"sqlite+aiosqlite:///{tmp_path / 'cli.db'}",
        jwt_secret_key="test-secret-key",
    )


async def invoke(settings, *argv):
    await run(build_parser().parse_args(list(argv)), settings)


class TestParser:
    def test_dataset_choices(self):
        args = build_parser().parse_args(["export-csv", "gallery", "-o", "-"])
        assert args.dataset == TransferDataset.GALLERY
        assert args.output == "-"

    def test_unknown_dataset(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["import-csv", "posts", "posts.csv"])


class TestCommands:
    async def test_init_seed_and_export(self, cli_settings, tmp_path, capsys):
        await invoke(cli_settings, "init-db", "--seed")
        output = tmp_path / "secretariat.csv"
        await invoke(cli_settings, "export-csv", "secretariat", "--output", str(output))

        lines = output.read_text().splitlines()
        assert lines[0] == "name,role,bio,imageUrl,order"
        assert lines[1].startswith("James Harrison,Secretary-General")
        assert "Seeded:" in capsys.readouterr().out

    async def test_import_csv(self, cli_settings, tmp_path):
        await invoke(cli_settings, "init-db")
        source = tmp_path / "countries.csv"
        source.write_text("name,committee,status\nFrance,UNSC,Assigned\nKenya,UNEP,Available\n")

        await invoke(cli_settings, "import-csv", "countries", str(source))
        await invoke(cli_settings, "export-csv", "countries", "-o", str(tmp_path / "out.csv"))

        assert (tmp_path / "out.csv").read_text().splitlines()[1:] == [
            "Kenya,UNEP,Available",
            "France,UNSC,Assigned",
        ]

    async def test_create_admin(self, cli_settings):
        await invoke(cli_settings, "init-db")
        await invoke(cli_settings, "create-admin", "Chair@HARMUN.org", "--password", "long-enough-1")

        database = Database.from_settings(cli_settings)
        async with database.session_maker() as session:
            accounts = AdminAccountService(session, AuthService(cli_settings))
            assert await accounts.authenticate("chair@harmun.org", "long-enough-1") is not None
        await database.dispose()

    async def test_short_password_rejected(self, cli_settings):
        await invoke(cli_settings, "init-db")
        with pytest.raises(ValueError):
            await invoke(cli_settings, "create-admin", "a@b.test", "--password", "short")
