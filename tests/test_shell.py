"""Tests for the interactive shell and command scripts."""

from dairyops.cli.main import cli

INVENTORY_ADD = (
    "inventory add --item-id INV1001 --item-name 'Milk cans' --category Packaging "
    "--quantity 20 --unit Piece --supplier AgroMart --location 'Main Store' "
    "--received-date 2024-01-10 --status Available"
)
PAYMENT_ADD = "payments add --payer-name {name} --amount 100 --payment-method UPI --status COMPLETED"


def _shell(cli_runner, *lines, args=()):
    return cli_runner.invoke(cli, [*args, "shell"], input="\n".join(lines) + "\n")


class TestShell:
    def test_milk_sale_session(self, cli_runner):
        """Test Cow 10 L at 40 shows a total of 400."""
        result = _shell(
            cli_runner,
            "milk-sales add --name ravi --village pune --milk-type Cow --quantity 10 --rate 40",
            "milk-sales list",
            "milk-sales stats",
            "exit",
        )

        assert result.exit_code == 0
        assert "Added milk sale (ID: 1)" in result.output
        assert "Ravi" in result.output
        assert "Total earnings: 400" in result.output
        assert "High demand type: Cow" in result.output

    def test_ends_at_end_of_input(self, cli_runner):
        result = _shell(cli_runner, "whoami")
        assert result.exit_code == 0
        assert "\nadmin\n" in result.output

    def test_errors_keep_the_shell_running(self, cli_runner):
        result = _shell(cli_runner, "bogus", "farmers add --name ravi", "whoami")

        assert result.exit_code == 0
        assert "No such command 'bogus'" in result.output
        assert "Farmer was not saved." in result.output
        assert "\nadmin\n" in result.output

    def test_unbalanced_quotes(self, cli_runner):
        result = _shell(cli_runner, "farmers add --name 'Ravi", "whoami")
        assert "Error: No closing quotation" in result.output
        assert "\nadmin\n" in result.output

    def test_help(self, cli_runner):
        result = _shell(cli_runner, "help", "help farmers")
        assert "Usage: dairyops" in result.output
        assert "Manage farmer records." in result.output

    def test_edit_and_view(self, cli_runner):
        result = _shell(cli_runner, INVENTORY_ADD, "inventory edit 1 --quantity 35", "inventory view 1")

        assert "Updated inventory item (ID: 1)" in result.output
        lines = result.output.splitlines()
        assert any(line.startswith("Quantity") and line.endswith(": 35") for line in lines)
        assert any(line.startswith("Name") and line.endswith(": Milk cans") for line in lines)

    def test_delete_cancelled(self, cli_runner):
        result = _shell(cli_runner, PAYMENT_ADD.format(name="ravi"), "payments delete 1", "n", "payments list")

        assert "Deletion cancelled." in result.output
        assert "TXN001" in result.output
        assert "RAVI" in result.output

    def test_transaction_ids_survive_delete(self, cli_runner):
        result = _shell(
            cli_runner,
            PAYMENT_ADD.format(name="RAVI"),
            PAYMENT_ADD.format(name="SITA"),
            "payments delete 1 --yes",
            "payments list",
            args=["--store", "sqlalchemy"],
        )

        assert "Deleted payment 1" in result.output
        assert "TXN002" in result.output
        assert "TXN001" not in result.output

    def test_logout_clears_records(self, cli_runner):
        result = _shell(
            cli_runner,
            "farmers add --name Ravi --village Pune --phone 9876543210",
            "logout",
            "farmers list",
            "login Sita",
            "farmers list",
        )

        assert "Logged out admin. All records were cleared." in result.output
        assert "Not logged in. Use 'login USERNAME' first." in result.output
        assert "Logged in as Sita" in result.output
        assert "No farmer records found." in result.output

    def test_search(self, cli_runner):
        result = _shell(
            cli_runner,
            "farmers add --name Ravi --village Pune --phone 9876543210",
            "farmers add --name Sita --village Nashik --phone 9123456780",
            "farmers list --search nashik",
        )
        assert "Found 1 farmer record(s):" in result.output

    def test_milk_entries_list_newest_first(self, cli_runner):
        result = _shell(
            cli_runner,
            "milk-entries add --name Ravi --village Alpha --quantity 250 --time '06:30 AM'",
            "milk-entries add --name Sita --village Beta --shift Evening --quantity 210 "
            "--time '06:45 PM'",
            "milk-entries list",
            "milk-entries stats",
            "exit",
        )

        assert result.exit_code == 0
        assert "Found 2 milk entry record(s):" in result.output
        listing = result.output.split("Found 2 milk entry record(s):")[1]
        assert listing.index("Sita") < listing.index("Ravi")
        assert "Morning: 250" in result.output
        assert "Evening: 210" in result.output


class TestRunScript:
    def test_run(self, cli_runner, tmp_path):
        script = tmp_path / "entries.txt"
        script.write_text(
            "# morning entries\n"
            "farmers add --name 'Ravi Kumar' --village Pune --phone 9876543210\n"
            "\n"
            "farmers add --name Sita --village Nashik --phone 9123456780 --cows 4\n"
            "farmers stats\n"
        )

        result = cli_runner.invoke(cli, ["run", str(script)])

        assert result.exit_code == 0
        assert "Total farmers: 2" in result.output
        assert "Total cows: 4" in result.output
        assert "Village count: 2" in result.output

    def test_run_reports_failures(self, cli_runner, tmp_path):
        script = tmp_path / "entries.txt"
        script.write_text(
            "farmers add --name ravi\n"
            "farmers add --name Sita --village Nashik --phone 9123456780\n"
        )

        result = cli_runner.invoke(cli, ["run", str(script)])

        assert result.exit_code == 1
        assert "Added farmer (ID: 1)" in result.output
        assert "1 command(s) failed" in result.output

    def test_stop_on_error(self, cli_runner, tmp_path):
        script = tmp_path / "entries.txt"
        script.write_text(
            "farmers add --name ravi\n"
            "farmers add --name Sita --village Nashik --phone 9123456780\n"
        )

        result = cli_runner.invoke(cli, ["run", str(script), "--stop-on-error"])

        assert result.exit_code == 1
        assert "Stopped at line 1" in result.output
        assert "Added farmer" not in result.output

    def test_echo(self, cli_runner, tmp_path):
        script = tmp_path / "entries.txt"
        script.write_text("whoami\n")

        result = cli_runner.invoke(cli, ["run", str(script), "--echo"])
        assert "> whoami" in result.output
