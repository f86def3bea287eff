import pytest

from blnverify import ChainSpec


@pytest.fixture
def and2_spec():
    """Two inputs, target a AND b, one 2-input step."""
    return ChainSpec(num_vars=2, target_hex="8", fanin=2, steps=1)


@pytest.fixture
def write_chains(tmp_path):
    """Write chain blocks to a file and return its path."""
    def _write(name, *blocks):
        path = tmp_path / name
        path.write_text("\n\n".join("\n".join(block) for block in blocks) + "\n",
                        encoding="utf-8")
        return path
    return _write
