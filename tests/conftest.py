"""Pytest configuration and shared fixtures."""

import pytest

from spliceview.records import PositionRecord, ScoredInterval, SpliceSites


@pytest.fixture(autouse=True)
def clean_current_plot():
    """Automatically clear the stored export plot before and after each test."""
    from spliceview.export import set_current_plot

    set_current_plot(None)
    yield
    set_current_plot(None)


def make_records(center: int, radius: int = 6, seqid: str = "chr1") -> list:
    """Records around a site with a strong G at the center and mixed flanks."""
    records = []
    for position in range(center - radius, center + radius + 1):
        offset = position - center
        if offset == 0:
            counts = {"G": 18, "A": 2}
        elif offset % 2:
            counts = {"A": 6, "C": 3, "T": 1}
        else:
            counts = {"T": 7, "G": 2, "N": 1}
        records.append(PositionRecord(seqid, position, **counts))
    return records


@pytest.fixture
def splice_sites():
    """Gene model with two donors and two acceptors."""
    return SpliceSites(
        donor_positions=[3400, 1200],
        acceptor_positions=[2100, 4200],
        end=5000,
    )


@pytest.fixture
def donor_records():
    """Records around the donor sites, sorted by position."""
    return make_records(1200) + make_records(3400)


@pytest.fixture
def acceptor_records():
    """Records around the acceptor sites, sorted by position."""
    return make_records(2100) + make_records(4200)


@pytest.fixture
def conservation_intervals():
    """Fifty 100-base intervals with a rising score."""
    return [ScoredInterval(i * 100, (i + 1) * 100, float(i % 10)) for i in range(50)]


@pytest.fixture
def splice_data(splice_sites, donor_records, acceptor_records, conservation_intervals):
    """Complete data dictionary for the splice strategy."""
    return {
        "splice_sites": splice_sites,
        "donors": donor_records,
        "acceptors": acceptor_records,
        "conservation": conservation_intervals,
    }
