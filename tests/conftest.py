#
# Pytest Fixtures
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from bytesize.fmt import SizeConf
from bytesize.units import Base, Style


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture
def base10_conf(monkeypatch):
    """Switch the package-wide formatting defaults to decimal units for one test."""
    monkeypatch.setattr(SizeConf, "DEFAULT_BASE", Base.BASE10)
    return SizeConf


@pytest.fixture
def full_style_conf(monkeypatch):
    """Switch the package-wide default unit spelling to capitalized full names for one test."""
    monkeypatch.setattr(SizeConf, "DEFAULT_STYLE", Style.FULL)
    return SizeConf
