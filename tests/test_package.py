"""Basic tests for the envset package."""


def test_import_envset():
    import envset

    assert envset.__version__ == "1.0.0"


def test_version_format():
    import envset

    parts = envset.__version__.split(".")
    assert len(parts) == 3
    assert all(p.isdigit() for p in parts)


def test_top_level_exports():
    import envset

    base = envset.parse_env("# comment\nA=1\nmalformed_line\nB=2")
    result = envset.replace_all(base, envset.parse_env("B=9\nC=5"), envset.ReplacementPolicy())

    assert base == {"A": "1", "B": "2"}
    assert result.text == "B=9\nA=1"
