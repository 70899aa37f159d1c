#
# Pytest Fixtures
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from bytesize.config import get_settings, set_settings


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def restore_settings():
    """Restore the process-wide settings after every test."""
    saved = get_settings()
    yield
    set_settings(saved)


@pytest.fixture
def config_file(tmp_path):
    """Fixture to write a TOML config file with given content."""

    def _write(content: str):
        path = tmp_path / "bytesize.toml"
        path.write_text(content, encoding="utf-8")
        return path

    return _write
