#
# Pytest Fixtures
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from xvalues.cli import main


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture
def run_cli(capsys):
    """Fixture to run the CLI and return (exit_code, stdout_lines, stderr)."""

    def _run(*argv: str) -> tuple[int, list[str], str]:
        try:
            code = main(list(argv))
        except SystemExit as exc:
            code = exc.code
        captured = capsys.readouterr()
        return code, captured.out.splitlines(), captured.err

    return _run
