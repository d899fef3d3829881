import pytest


def build_line(code="", name="", strength="", form="", prefix="0000000001 ", gap=" "):
    """Lay out one fixed-width NAPPI line (79 bytes for ASCII fields)."""
    return (
        prefix[:11].ljust(11)
        + code[:9].ljust(9)
        + name[:38].ljust(38)
        + gap[:1].ljust(1)
        + strength[:16].ljust(16)
        + form[:4].ljust(4)
    )


@pytest.fixture
def nappi_line():
    return build_line


@pytest.fixture
def nappi_file(tmp_path):
    """
    Factory writing a NAPPI file from (code, name, strength, form) tuples.
    Raw strings in the list are written as-is.
    """
    counter = {"n": 0}

    def _write(entries, filename=None):
        counter["n"] += 1
        path = tmp_path / (filename or f"nappi_{counter['n']}.txt")
        lines = [e if isinstance(e, str) else build_line(*e) for e in entries]
        path.write_text("".join(line + "\n" for line in lines), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_entries():
    return [
        ("700001001", "ASPIRIN 300MG TABLET", "300MG", "TAB"),
        ("700002001", "PARACETAMOL 500MG", "500MG", "TAB"),
        ("700003001", "PARACETAMOL SYRUP", "120MG/5ML", "SYR"),
        ("700004001", "Ibuprofen 200mg Capsule", "200MG", "CAP"),
        ("700005001", "PARACETAMOL 500MG", "500MG", "CAP"),
    ]
