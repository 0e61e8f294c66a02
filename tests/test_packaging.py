from pathlib import Path

import pytest

from tests.fakes.bundle import make_bundle

tomllib = pytest.importorskip("tomllib")

PYPROJECT = Path(__file__).resolve().parents[1] / "pyproject.toml"


def _package_data_globs() -> list[str]:
    with PYPROJECT.open("rb") as fh:
        config = tomllib.load(fh)
    return config["tool"]["setuptools"]["package-data"]["signalwire_skill"]


def test_package_data_ships_nested_category_pages(tmp_path):
    bundle = make_bundle(
        tmp_path / "bundle",
        {"reference/advanced/prefabs.md": "# Prefabs\n\nInfoGathererAgent.\n"},
    )
    shipped = set()
    for pattern in _package_data_globs():
        shipped.update(tmp_path.glob(pattern))
    assert shipped == set(bundle.rglob("*.md"))
    assert bundle / "reference" / "advanced" / "prefabs.md" in shipped
